from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account (administrator or teacher).

    Plain data object; no database access here.
    """

    user_id: int
    name: str
    username: str
    password_hash: str
    role: Role
    email: Optional[str] = None
    subject: Optional[str] = None
    is_active: bool = True
