from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_profile(
        self,
        user_id: int,
        *,
        name: str,
        email: Optional[str],
        subject: Optional[str],
        password_hash: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def list_by_role(self, role: Role, *, active_only: bool = False) -> Sequence[User]:
        raise NotImplementedError
