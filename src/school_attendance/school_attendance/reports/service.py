from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_timestamp
from ..core.constants import EXPORT_CSV_HEADER
from ..core.enums import AttendanceStatus, Role
from ..daily_status.repository import DailyStatusRepository
from ..users.repository import UserRepository


@dataclass(frozen=True)
class TeacherOverview:
    teacher_id: int
    name: str
    subject: Optional[str]
    status: Optional[str]
    reason: Optional[str]
    counts: dict

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def _clean_reason(value: Optional[str]) -> str:
    return (value or "").replace(",", ";")


def _iso(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


class ReportService:
    """Admin monitoring across all teachers and the CSV export."""

    def __init__(self, users: UserRepository, attendance: AttendanceRepository, statuses: DailyStatusRepository):
        self._users = users
        self._attendance = attendance
        self._statuses = statuses

    def daily_overview(self, work_date: date) -> list[TeacherOverview]:
        statuses = {s.teacher_id: s for s in self._statuses.list_for_date(work_date)}

        counts: dict[int, dict] = {}
        for c in self._attendance.count_by_teacher_and_status(work_date):
            counts.setdefault(c["teacher_id"], {s.value: 0 for s in AttendanceStatus})[c["status"].value] = c["total"]

        out: list[TeacherOverview] = []
        for teacher in self._users.list_by_role(Role.GURU, active_only=True):
            st = statuses.get(teacher.user_id)
            out.append(
                TeacherOverview(
                    teacher_id=teacher.user_id,
                    name=teacher.name,
                    subject=teacher.subject,
                    status=st.status.value if st else None,
                    reason=st.reason if st else None,
                    counts=counts.get(teacher.user_id, {s.value: 0 for s in AttendanceStatus}),
                )
            )
        return out

    def attendance_rows(
        self,
        *,
        start: date,
        end: date,
        teacher_id: Optional[int] = None,
        class_level: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        return self._attendance.get_report_rows(
            start_date=start,
            end_date=end,
            teacher_id=teacher_id,
            class_level=class_level,
        )

    def export_csv(
        self,
        *,
        start: date,
        end: date,
        teacher_id: Optional[int] = None,
        class_level: Optional[int] = None,
    ) -> str:
        rows = self.attendance_rows(start=start, end=end, teacher_id=teacher_id, class_level=class_level)

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(EXPORT_CSV_HEADER)
        for r in rows:
            writer.writerow(
                [
                    r.work_date.isoformat(),
                    r.teacher_name,
                    r.student_name,
                    r.class_level,
                    r.status.value,
                    _iso(r.sick_date),
                    _iso(r.excused_start_date),
                    r.excused_days if r.excused_days is not None else "",
                    _clean_reason(r.excused_reason),
                    format_timestamp(r.created_at),
                ]
            )
        return out.getvalue()
