from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_or(value: Optional[str], default: date) -> date:
    v = (value or "").strip()
    if not v:
        return default
    try:
        return parse_iso_date(v)
    except ValueError:
        return default


def today_local() -> date:
    return now_local().date()


def now_local() -> datetime:
    """Current local time.

    Wrapped so tests can patch it.
    """
    return datetime.now()


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def to_date(value: Any) -> Optional[date]:
    """Normalize DATE values across backends.

    MySQL returns datetime.date, SQLite returns the stored ISO string.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value[:10])
    raise TypeError(f"Unsupported DATE value type: {type(value)!r}")


def to_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip().replace("T", " "))
    raise TypeError(f"Unsupported DATETIME value type: {type(value)!r}")
