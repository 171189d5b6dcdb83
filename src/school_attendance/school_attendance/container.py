from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sql_attendance_repository import SQLAttendanceRepository
from .daily_status.service import DailyStatusService
from .daily_status.sql_daily_status_repository import SQLDailyStatusRepository
from .database.base import Database
from .reports.service import ReportService
from .students.service import StudentService
from .students.sql_student_repository import SQLStudentRepository
from .users.service import AuthService, UserService
from .users.sql_user_repository import SQLUserRepository


@dataclass(frozen=True)
class Container:
    db: Database

    users_repo: SQLUserRepository
    students_repo: SQLStudentRepository
    attendance_repo: SQLAttendanceRepository
    daily_status_repo: SQLDailyStatusRepository

    auth_service: AuthService
    user_service: UserService
    student_service: StudentService
    daily_status_service: DailyStatusService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, db: Database) -> Container:
    users_repo = SQLUserRepository(db)
    students_repo = SQLStudentRepository(db)
    attendance_repo = SQLAttendanceRepository(db)
    daily_status_repo = SQLDailyStatusRepository(db)

    daily_status_service = DailyStatusService(daily_status_repo)

    return Container(
        db=db,
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        daily_status_repo=daily_status_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        student_service=StudentService(students_repo),
        daily_status_service=daily_status_service,
        attendance_service=AttendanceService(db, attendance_repo, students_repo, daily_status_service),
        report_service=ReportService(users_repo, attendance_repo, daily_status_repo),
    )
