from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.base import Database
from .model import User
from .repository import UserRepository

_COLUMNS = "id, name, email, username, password_hash, role, subject, active"


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["id"]),
        name=row["name"],
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        email=row.get("email"),
        subject=row.get("subject"),
        is_active=bool(row.get("active", 1)),
    )


class SQLUserRepository(UserRepository):
    def __init__(self, db: Database):
        self._db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._db.fetchone(f"SELECT {_COLUMNS} FROM users WHERE id=?", (int(user_id),))
        return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        row = self._db.fetchone(f"SELECT {_COLUMNS} FROM users WHERE username=?", (username,))
        return _to_user(row) if row else None

    def create_user(
        self,
        *,
        name: str,
        email: Optional[str],
        username: str,
        password_hash: str,
        role: Role,
        subject: Optional[str],
    ) -> int:
        res = self._db.execute(
            """
            INSERT INTO users(name, email, username, password_hash, role, subject, active)
            VALUES(?,?,?,?,?,?,1)
            """,
            (name, email, username, password_hash, role.value, subject),
        )
        return res.lastrowid

    def update_profile(
        self,
        user_id: int,
        *,
        name: str,
        email: Optional[str],
        subject: Optional[str],
        password_hash: Optional[str] = None,
    ) -> bool:
        if password_hash:
            res = self._db.execute(
                "UPDATE users SET name=?, email=?, subject=?, password_hash=? WHERE id=?",
                (name, email, subject, password_hash, int(user_id)),
            )
        else:
            res = self._db.execute(
                "UPDATE users SET name=?, email=?, subject=? WHERE id=?",
                (name, email, subject, int(user_id)),
            )
        return res.rowcount > 0

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        res = self._db.execute("UPDATE users SET active=? WHERE id=?", (1 if is_active else 0, int(user_id)))
        return res.rowcount > 0

    def list_by_role(self, role: Role, *, active_only: bool = False) -> Sequence[User]:
        sql = f"SELECT {_COLUMNS} FROM users WHERE role=?"
        if active_only:
            sql += " AND active=1"
        sql += " ORDER BY name ASC"
        return [_to_user(r) for r in self._db.fetchall(sql, (role.value,))]
