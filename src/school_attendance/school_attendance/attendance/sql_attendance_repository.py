from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import format_timestamp, to_date, to_datetime
from ..core.enums import AttendanceStatus
from ..database.base import Database
from .model import AttendanceDetails, AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_COLUMNS = (
    "id, student_id, teacher_id, date, status, sick_date, "
    "excused_start_date, excused_days, excused_reason, created_at"
)


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        student_id=int(r["student_id"]),
        teacher_id=int(r["teacher_id"]),
        work_date=to_date(r["date"]),
        status=AttendanceStatus(r["status"]),
        created_at=to_datetime(r["created_at"]),
        sick_date=to_date(r.get("sick_date")),
        excused_start_date=to_date(r.get("excused_start_date")),
        excused_days=int(r["excused_days"]) if r.get("excused_days") is not None else None,
        excused_reason=r.get("excused_reason"),
    )


class SQLAttendanceRepository(AttendanceRepository):
    def __init__(self, db: Database):
        self._db = db

    def get_for_key(self, *, student_id: int, teacher_id: int, work_date: date) -> Optional[AttendanceRecord]:
        row = self._db.fetchone(
            f"""
            SELECT {_COLUMNS}
            FROM attendance
            WHERE student_id=? AND teacher_id=? AND date=?
            """,
            (int(student_id), int(teacher_id), work_date.isoformat()),
        )
        return _to_record(row) if row else None

    def insert(
        self,
        *,
        student_id: int,
        teacher_id: int,
        work_date: date,
        details: AttendanceDetails,
        created_at: datetime,
    ) -> int:
        res = self._db.execute(
            """
            INSERT INTO attendance(
                student_id, teacher_id, date, status, sick_date,
                excused_start_date, excused_days, excused_reason, created_at
            )
            VALUES(?,?,?,?,?,?,?,?,?)
            """,
            (
                int(student_id),
                int(teacher_id),
                work_date.isoformat(),
                details.status.value,
                _iso(details.sick_date),
                _iso(details.excused_start_date),
                details.excused_days,
                details.excused_reason,
                format_timestamp(created_at),
            ),
        )
        return res.lastrowid

    def update(self, *, attendance_id: int, details: AttendanceDetails, created_at: datetime) -> None:
        self._db.execute(
            """
            UPDATE attendance
            SET status=?, sick_date=?, excused_start_date=?, excused_days=?, excused_reason=?, created_at=?
            WHERE id=?
            """,
            (
                details.status.value,
                _iso(details.sick_date),
                _iso(details.excused_start_date),
                details.excused_days,
                details.excused_reason,
                format_timestamp(created_at),
                int(attendance_id),
            ),
        )

    def list_for_teacher_and_date(self, *, teacher_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        rows = self._db.fetchall(
            f"SELECT {_COLUMNS} FROM attendance WHERE teacher_id=? AND date=? ORDER BY student_id ASC",
            (int(teacher_id), work_date.isoformat()),
        )
        return [_to_record(r) for r in rows]

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        teacher_id: Optional[int] = None,
        class_level: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["a.date BETWEEN ? AND ?"]
        params: list[object] = [start_date.isoformat(), end_date.isoformat()]

        if teacher_id is not None:
            clauses.append("a.teacher_id=?")
            params.append(int(teacher_id))
        if class_level is not None:
            clauses.append("s.class_level=?")
            params.append(int(class_level))

        where = " AND ".join(clauses)
        rows = self._db.fetchall(
            f"""
            SELECT
                a.date, a.status, a.sick_date, a.excused_start_date, a.excused_days,
                a.excused_reason, a.created_at,
                u.id AS teacher_id, u.name AS teacher_name,
                s.id AS student_id, s.name AS student_name, s.class_level
            FROM attendance a
            JOIN users u ON u.id = a.teacher_id
            JOIN students s ON s.id = a.student_id
            WHERE {where}
            ORDER BY a.date DESC, u.name ASC, s.class_level ASC, s.name ASC
            """,
            tuple(params),
        )

        return [
            AttendanceReportRow(
                work_date=to_date(r["date"]),
                teacher_id=int(r["teacher_id"]),
                teacher_name=r["teacher_name"],
                student_id=int(r["student_id"]),
                student_name=r["student_name"],
                class_level=int(r["class_level"]),
                status=AttendanceStatus(r["status"]),
                created_at=to_datetime(r["created_at"]),
                sick_date=to_date(r.get("sick_date")),
                excused_start_date=to_date(r.get("excused_start_date")),
                excused_days=int(r["excused_days"]) if r.get("excused_days") is not None else None,
                excused_reason=r.get("excused_reason"),
            )
            for r in rows
        ]

    def count_by_teacher_and_status(self, work_date: date) -> Sequence[dict]:
        rows = self._db.fetchall(
            """
            SELECT teacher_id, status, COUNT(*) AS total
            FROM attendance
            WHERE date=?
            GROUP BY teacher_id, status
            """,
            (work_date.isoformat(),),
        )
        return [
            {"teacher_id": int(r["teacher_id"]), "status": AttendanceStatus(r["status"]), "total": int(r["total"])}
            for r in rows
        ]
