from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..core.constants import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
)
from ..core.enums import Role
from .base import Database

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parent / "sql"


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def schema_path_for(db: Database) -> Path:
    return SQL_DIR / f"{db.dialect}.sql"


def apply_schema(db: Database, *, schema_path: Optional[str | Path] = None) -> None:
    """Create tables if missing. Safe to run on every startup."""

    if db.dialect == "mysql":
        db.ensure_database_exists()

    path = Path(schema_path) if schema_path else schema_path_for(db)
    sql = path.read_text(encoding="utf-8")

    with db.transaction():
        with db.cursor() as cur:
            for stmt in _iter_sql_statements(sql):
                cur.execute(stmt)
    logger.info("Schema applied from %s", path.name)


def ensure_default_admin(
    db: Database,
    *,
    username: str = DEFAULT_ADMIN_USERNAME,
    password: str = DEFAULT_ADMIN_PASSWORD,
) -> bool:
    """Seed the first administrator when no ADMIN account exists.

    Returns True if an account was created.
    """

    row = db.fetchone("SELECT COUNT(*) AS c FROM users WHERE role=?", (Role.ADMIN.value,))
    if row and int(row["c"]) > 0:
        return False

    db.execute(
        """
        INSERT INTO users(name, email, username, password_hash, role, active)
        VALUES(?,?,?,?,?,1)
        """,
        (DEFAULT_ADMIN_NAME, DEFAULT_ADMIN_EMAIL, username, generate_password_hash(password), Role.ADMIN.value),
    )
    logger.info("Default admin account %r created", username)
    return True
