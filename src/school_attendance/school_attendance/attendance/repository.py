from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceDetails, AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_key(self, *, student_id: int, teacher_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def insert(
        self,
        *,
        student_id: int,
        teacher_id: int,
        work_date: date,
        details: AttendanceDetails,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def update(self, *, attendance_id: int, details: AttendanceDetails, created_at: datetime) -> None:
        raise NotImplementedError

    def list_for_teacher_and_date(self, *, teacher_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        teacher_id: Optional[int] = None,
        class_level: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError

    def count_by_teacher_and_status(self, work_date: date) -> Sequence[dict]:
        """Rows of {teacher_id, status, total} for one date."""

        raise NotImplementedError
