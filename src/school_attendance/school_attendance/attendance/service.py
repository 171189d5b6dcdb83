from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_date_or
from ..common.validators import optional_text
from ..core.constants import DEFAULT_EXCUSED_DAYS, MAX_EXCUSED_DAYS
from ..core.enums import AttendanceStatus, DailyStatus
from ..daily_status.service import DailyStatusService
from ..database.base import Database
from ..students.repository import StudentRepository
from .model import AttendanceDetails, BatchResult, SheetRow, StudentSubmission
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _parse_days(value: Optional[str]) -> int:
    try:
        days = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_EXCUSED_DAYS
    return days if 1 <= days <= MAX_EXCUSED_DAYS else DEFAULT_EXCUSED_DAYS


def build_details(submission: StudentSubmission, work_date: date) -> AttendanceDetails:
    """Apply the per-status defaults to a raw submission."""

    status = submission.status
    if status == AttendanceStatus.SICK:
        return AttendanceDetails(
            status=status,
            sick_date=parse_iso_date_or(submission.sick_date, work_date),
        )
    if status == AttendanceStatus.EXCUSED:
        return AttendanceDetails(
            status=status,
            excused_start_date=parse_iso_date_or(submission.excused_start_date, work_date),
            excused_days=_parse_days(submission.excused_days),
            excused_reason=optional_text(submission.excused_reason),
        )
    return AttendanceDetails(status=AttendanceStatus.PRESENT)


class AttendanceService:
    def __init__(
        self,
        db: Database,
        attendance: AttendanceRepository,
        students: StudentRepository,
        daily_status: DailyStatusService,
    ):
        self._db = db
        self._attendance = attendance
        self._students = students
        self._daily_status = daily_status

    def record_batch(
        self,
        teacher_id: int,
        work_date: date,
        submissions: Mapping[int, StudentSubmission],
        *,
        now: datetime | None = None,
    ) -> BatchResult:
        """Upsert one record per submitted active student, then mark the day DONE.

        Runs as a single transaction: if any write fails nothing is kept.
        """

        now = now or now_local()
        teacher_id = int(teacher_id)
        written = 0
        skipped = 0

        try:
            with self._db.transaction():
                for student in self._students.list_for_teacher(teacher_id, active_only=True):
                    submission = submissions.get(student.student_id)
                    if submission is None or submission.status is None:
                        skipped += 1
                        continue

                    details = build_details(submission, work_date)
                    existing = self._attendance.get_for_key(
                        student_id=student.student_id,
                        teacher_id=teacher_id,
                        work_date=work_date,
                    )
                    if existing:
                        self._attendance.update(attendance_id=existing.attendance_id, details=details, created_at=now)
                    else:
                        self._attendance.insert(
                            student_id=student.student_id,
                            teacher_id=teacher_id,
                            work_date=work_date,
                            details=details,
                            created_at=now,
                        )
                    written += 1

                self._daily_status.set_status(teacher_id, DailyStatus.DONE, work_date=work_date)
        except Exception:
            logger.warning("Attendance batch rolled back (teacher id=%s, date=%s)", teacher_id, work_date.isoformat())
            raise

        logger.info(
            "Attendance batch saved (teacher id=%s, date=%s, written=%s, skipped=%s)",
            teacher_id,
            work_date.isoformat(),
            written,
            skipped,
        )
        return BatchResult(work_date=work_date, written=written, skipped=skipped)

    def get_sheet(self, teacher_id: int, work_date: date) -> Sequence[SheetRow]:
        """Active students with whatever was already recorded for the date."""

        records = {
            r.student_id: r
            for r in self._attendance.list_for_teacher_and_date(teacher_id=int(teacher_id), work_date=work_date)
        }
        students = self._students.list_for_teacher(int(teacher_id), active_only=True)
        return [SheetRow(student=s, record=records.get(s.student_id)) for s in students]
