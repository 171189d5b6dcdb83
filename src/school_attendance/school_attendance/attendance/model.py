from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceDetails:
    """Status plus the detail fields that depend on it."""

    status: AttendanceStatus
    sick_date: Optional[date] = None
    excused_start_date: Optional[date] = None
    excused_days: Optional[int] = None
    excused_reason: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance. Unique on (student_id, teacher_id, work_date)."""

    attendance_id: int
    student_id: int
    teacher_id: int
    work_date: date
    status: AttendanceStatus
    created_at: datetime
    sick_date: Optional[date] = None
    excused_start_date: Optional[date] = None
    excused_days: Optional[int] = None
    excused_reason: Optional[str] = None


@dataclass(frozen=True)
class StudentSubmission:
    """What the teacher submitted for one student, before defaults are applied.

    Detail values are kept as raw form strings.
    """

    status: Optional[AttendanceStatus] = None
    sick_date: Optional[str] = None
    excused_start_date: Optional[str] = None
    excused_days: Optional[str] = None
    excused_reason: Optional[str] = None


@dataclass(frozen=True)
class BatchResult:
    work_date: date
    written: int
    skipped: int


@dataclass(frozen=True)
class SheetRow:
    """One line of the teacher's attendance form."""

    student: Student
    record: Optional[AttendanceRecord]


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for monitoring and export (joined with teacher and student)."""

    work_date: date
    teacher_id: int
    teacher_name: str
    student_id: int
    student_name: str
    class_level: int
    status: AttendanceStatus
    created_at: datetime
    sick_date: Optional[date] = None
    excused_start_date: Optional[date] = None
    excused_days: Optional[int] = None
    excused_reason: Optional[str] = None
