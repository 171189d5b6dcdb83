from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.school_attendance.school_attendance.core.enums import DailyStatus, Role
from src.school_attendance.school_attendance.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.school_attendance.school_attendance.daily_status.model import TeacherDailyStatus
from src.school_attendance.school_attendance.daily_status.service import DailyStatusService
from src.school_attendance.school_attendance.students.model import Student
from src.school_attendance.school_attendance.students.service import StudentService
from src.school_attendance.school_attendance.users.model import User
from src.school_attendance.school_attendance.users.service import AuthService, UserService


class InMemoryUsers:
    def __init__(self, *users: User):
        self._by_id: dict[int, User] = {u.user_id: u for u in users}
        self._id = max(self._by_id, default=0)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def create_user(self, *, name, email, username, password_hash, role, subject) -> int:
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            name=name,
            username=username,
            password_hash=password_hash,
            role=role,
            email=email,
            subject=subject,
        )
        return self._id

    def update_profile(self, user_id, *, name, email, subject, password_hash=None) -> bool:
        u = self._by_id[user_id]
        self._by_id[user_id] = replace(
            u, name=name, email=email, subject=subject, password_hash=password_hash or u.password_hash
        )
        return True

    def set_active(self, user_id, *, is_active) -> bool:
        self._by_id[user_id] = replace(self._by_id[user_id], is_active=is_active)
        return True

    def list_by_role(self, role, *, active_only=False):
        return [u for u in self._by_id.values() if u.role == role and (u.is_active or not active_only)]


class InMemoryStudents:
    def __init__(self, *students: Student):
        self._by_id = {s.student_id: s for s in students}

    def get_by_id(self, student_id):
        return self._by_id.get(student_id)

    def list_for_teacher(self, teacher_id, *, class_level=None, active_only=False):
        items = [
            s
            for s in self._by_id.values()
            if s.teacher_id == teacher_id
            and (class_level is None or s.class_level == class_level)
            and (s.is_active or not active_only)
        ]
        return sorted(items, key=lambda s: (s.class_level, s.name))

    def create(self, *, teacher_id, name, class_level) -> int:
        sid = len(self._by_id) + 1
        self._by_id[sid] = Student(student_id=sid, name=name, class_level=class_level, teacher_id=teacher_id)
        return sid

    def set_active(self, student_id, *, is_active) -> bool:
        self._by_id[student_id] = replace(self._by_id[student_id], is_active=is_active)
        return True


class InMemoryStatuses:
    def __init__(self):
        self._rows: dict[tuple[int, date], TeacherDailyStatus] = {}

    def get(self, *, teacher_id, work_date):
        return self._rows.get((teacher_id, work_date))

    def insert(self, *, teacher_id, work_date, status, reason) -> int:
        sid = len(self._rows) + 1
        self._rows[(teacher_id, work_date)] = TeacherDailyStatus(sid, teacher_id, work_date, status, reason)
        return sid

    def update(self, *, status_id, status, reason) -> None:
        for key, row in self._rows.items():
            if row.status_id == status_id:
                self._rows[key] = replace(row, status=status, reason=reason)

    def list_for_date(self, work_date):
        return [r for (_, d), r in self._rows.items() if d == work_date]


def _teacher(user_id=2, *, password="rahasia123", active=True) -> User:
    return User(
        user_id=user_id,
        name="Bu Sari",
        username=f"guru{user_id}",
        password_hash=generate_password_hash(password),
        role=Role.GURU,
        is_active=active,
    )


def test_auth_wrong_password_raises():
    auth = AuthService(InMemoryUsers(_teacher()))
    with pytest.raises(AuthenticationError):
        auth.authenticate("guru2", "salah")


def test_auth_inactive_teacher_cannot_login():
    auth = AuthService(InMemoryUsers(_teacher(active=False)))
    with pytest.raises(AuthenticationError):
        auth.authenticate("guru2", "rahasia123")


def test_auth_missing_fields_is_validation_error():
    auth = AuthService(InMemoryUsers(_teacher()))
    with pytest.raises(ValidationError):
        auth.authenticate("", "")


def test_auth_returns_session_identity():
    s_user = AuthService(InMemoryUsers(_teacher())).authenticate("guru2", "rahasia123")
    assert (s_user.user_id, s_user.name, s_user.role) == (2, "Bu Sari", Role.GURU)


def test_create_teacher_rejects_duplicate_username():
    svc = UserService(InMemoryUsers(_teacher()))
    with pytest.raises(ValidationError):
        svc.create_teacher(name="Lain", username="guru2", password="rahasia123")


def test_create_teacher_requires_min_password_length():
    svc = UserService(InMemoryUsers())
    with pytest.raises(ValidationError):
        svc.create_teacher(name="Pak Budi", username="budi", password="123")


def test_update_teacher_keeps_password_when_blank():
    users = InMemoryUsers(_teacher())
    before = users.get_by_id(2).password_hash

    UserService(users).update_teacher(2, name="Bu Sari W.", subject="IPA")

    after = users.get_by_id(2)
    assert after.name == "Bu Sari W."
    assert after.subject == "IPA"
    assert after.password_hash == before


def test_toggle_teacher_flips_active_flag():
    users = InMemoryUsers(_teacher())
    svc = UserService(users)

    assert svc.toggle_active(2) is False
    assert svc.toggle_active(2) is True


def test_admin_accounts_are_not_managed_as_teachers():
    admin = replace(_teacher(1), role=Role.ADMIN)
    with pytest.raises(NotFoundError):
        UserService(InMemoryUsers(admin)).toggle_active(1)


def test_not_done_then_done_clears_reason():
    statuses = InMemoryStatuses()
    svc = DailyStatusService(statuses)
    day = date(2024, 3, 1)

    svc.set_status(2, DailyStatus.NOT_DONE, work_date=day, reason="rapat dinas")
    assert svc.get(2, day).reason == "rapat dinas"

    svc.set_status(2, DailyStatus.DONE, work_date=day, reason="ignored")
    final = svc.get(2, day)
    assert final.status == DailyStatus.DONE
    assert final.reason is None
    assert len(statuses.list_for_date(day)) == 1


def test_daily_status_defaults_to_today(monkeypatch):
    from src.school_attendance.school_attendance.daily_status import service as daily_service

    monkeypatch.setattr(daily_service, "today_local", lambda: date(2024, 5, 2))
    statuses = InMemoryStatuses()

    DailyStatusService(statuses).set_status(2, DailyStatus.DONE)

    assert statuses.get(teacher_id=2, work_date=date(2024, 5, 2)) is not None


def test_parse_daily_status_rejects_unknown_value():
    with pytest.raises(ValidationError):
        DailyStatusService.parse_status("MAYBE")


def test_add_student_rejects_invalid_class_level():
    svc = StudentService(InMemoryStudents())
    with pytest.raises(ValidationError):
        svc.add_student(2, name="Andi", class_level="10")


def test_toggle_student_of_other_teacher_is_forbidden():
    student = Student(student_id=1, name="Andi", class_level=7, teacher_id=3)
    with pytest.raises(AuthorizationError):
        StudentService(InMemoryStudents(student)).toggle_active(2, 1)


def test_roster_filter_by_class_level():
    students = InMemoryStudents(
        Student(1, "Zaki", 8, 2),
        Student(2, "Andi", 8, 2),
        Student(3, "Budi", 7, 2),
    )
    roster = StudentService(students).list_roster(2, class_level=8)
    assert [s.name for s in roster] == ["Andi", "Zaki"]
