from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DailyStatus


@dataclass(frozen=True)
class TeacherDailyStatus:
    """Whether a teacher completed attendance entry for one date. Unique on (teacher_id, work_date)."""

    status_id: int
    teacher_id: int
    work_date: date
    status: DailyStatus
    reason: Optional[str] = None
