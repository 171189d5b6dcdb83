from __future__ import annotations

from typing import Optional

from ..core.constants import CLASS_LEVELS
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} minimal {min_len} karakter")
    return value


def require_class_level(value) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Kelas tidak valid")
    if level not in CLASS_LEVELS:
        raise ValidationError("Kelas harus 7, 8 atau 9")
    return level


def optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None
