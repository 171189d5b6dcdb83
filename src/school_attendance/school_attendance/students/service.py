from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_class_level, require_non_empty
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: a teacher manages their own roster."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_roster(
        self,
        teacher_id: int,
        *,
        class_level: Optional[int] = None,
        active_only: bool = False,
    ) -> Sequence[Student]:
        if class_level is not None:
            class_level = require_class_level(class_level)
        return self._students.list_for_teacher(int(teacher_id), class_level=class_level, active_only=active_only)

    def add_student(self, teacher_id: int, *, name: str, class_level) -> int:
        name = require_non_empty(name, "Nama siswa")
        level = require_class_level(class_level)

        student_id = self._students.create(teacher_id=int(teacher_id), name=name, class_level=level)
        logger.info("Teacher id=%s added student id=%s (class %s)", teacher_id, student_id, level)
        return student_id

    def toggle_active(self, teacher_id: int, student_id: int) -> bool:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFoundError("Siswa tidak ditemukan")
        if student.teacher_id != int(teacher_id):
            raise AuthorizationError("Siswa ini bukan milik Anda")

        new_value = not student.is_active
        self._students.set_active(student.student_id, is_active=new_value)
        return new_value
