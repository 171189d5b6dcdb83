from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username dan password wajib diisi")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Username atau password salah")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError("Username atau password salah")

        logger.info("User %r logged in (role=%s)", user.username, user.role.value)
        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)


class UserService:
    """Use case: manage teacher accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_teachers(self) -> Sequence[User]:
        return self._users.list_by_role(Role.GURU)

    def get_teacher(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user or user.role != Role.GURU:
            raise NotFoundError("Guru tidak ditemukan")
        return user

    def create_teacher(
        self,
        *,
        name: str,
        username: str,
        password: str,
        email: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Nama")
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_username(username):
            raise ValidationError("Username sudah digunakan")

        user_id = self._users.create_user(
            name=name,
            email=optional_text(email),
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.GURU,
            subject=optional_text(subject),
        )
        logger.info("Teacher account %r created (id=%s)", username, user_id)
        return user_id

    def update_teacher(
        self,
        user_id: int,
        *,
        name: str,
        email: Optional[str] = None,
        subject: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> None:
        teacher = self.get_teacher(user_id)
        name = require_non_empty(name, "Nama")

        password_hash = None
        if new_password:
            require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(new_password)

        self._users.update_profile(
            teacher.user_id,
            name=name,
            email=optional_text(email),
            subject=optional_text(subject),
            password_hash=password_hash,
        )
        logger.info("Teacher account id=%s updated", teacher.user_id)

    def toggle_active(self, user_id: int) -> bool:
        """Flip the active flag of a teacher account. Returns the new value."""

        teacher = self.get_teacher(user_id)
        new_value = not teacher.is_active
        self._users.set_active(teacher.user_id, is_active=new_value)
        logger.info("Teacher account id=%s active=%s", teacher.user_id, new_value)
        return new_value
