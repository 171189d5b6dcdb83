from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import DailyStatus
from .model import TeacherDailyStatus


class DailyStatusRepository(Protocol):
    def get(self, *, teacher_id: int, work_date: date) -> Optional[TeacherDailyStatus]:
        raise NotImplementedError

    def insert(self, *, teacher_id: int, work_date: date, status: DailyStatus, reason: Optional[str]) -> int:
        raise NotImplementedError

    def update(self, *, status_id: int, status: DailyStatus, reason: Optional[str]) -> None:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[TeacherDailyStatus]:
        raise NotImplementedError
