from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import to_date
from ..core.enums import DailyStatus
from ..database.base import Database
from .model import TeacherDailyStatus
from .repository import DailyStatusRepository


def _to_status(row: Dict[str, Any]) -> TeacherDailyStatus:
    return TeacherDailyStatus(
        status_id=int(row["id"]),
        teacher_id=int(row["teacher_id"]),
        work_date=to_date(row["date"]),
        status=DailyStatus(row["status"]),
        reason=row.get("reason"),
    )


class SQLDailyStatusRepository(DailyStatusRepository):
    def __init__(self, db: Database):
        self._db = db

    def get(self, *, teacher_id: int, work_date: date) -> Optional[TeacherDailyStatus]:
        row = self._db.fetchone(
            """
            SELECT id, teacher_id, date, status, reason
            FROM teacher_attendance_status
            WHERE teacher_id=? AND date=?
            """,
            (int(teacher_id), work_date.isoformat()),
        )
        return _to_status(row) if row else None

    def insert(self, *, teacher_id: int, work_date: date, status: DailyStatus, reason: Optional[str]) -> int:
        res = self._db.execute(
            "INSERT INTO teacher_attendance_status(teacher_id, date, status, reason) VALUES(?,?,?,?)",
            (int(teacher_id), work_date.isoformat(), status.value, reason),
        )
        return res.lastrowid

    def update(self, *, status_id: int, status: DailyStatus, reason: Optional[str]) -> None:
        self._db.execute(
            "UPDATE teacher_attendance_status SET status=?, reason=? WHERE id=?",
            (status.value, reason, int(status_id)),
        )

    def list_for_date(self, work_date: date) -> Sequence[TeacherDailyStatus]:
        rows = self._db.fetchall(
            """
            SELECT id, teacher_id, date, status, reason
            FROM teacher_attendance_status
            WHERE date=?
            ORDER BY teacher_id ASC
            """,
            (work_date.isoformat(),),
        )
        return [_to_status(r) for r in rows]
