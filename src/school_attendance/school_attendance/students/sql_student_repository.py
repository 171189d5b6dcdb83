from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.base import Database
from .model import Student
from .repository import StudentRepository


def _to_student(row: Dict[str, Any]) -> Student:
    return Student(
        student_id=int(row["id"]),
        name=row["name"],
        class_level=int(row["class_level"]),
        teacher_id=int(row["teacher_id"]),
        is_active=bool(row.get("active", 1)),
    )


class SQLStudentRepository(StudentRepository):
    def __init__(self, db: Database):
        self._db = db

    def get_by_id(self, student_id: int) -> Optional[Student]:
        row = self._db.fetchone(
            "SELECT id, name, class_level, teacher_id, active FROM students WHERE id=?",
            (int(student_id),),
        )
        return _to_student(row) if row else None

    def list_for_teacher(
        self,
        teacher_id: int,
        *,
        class_level: Optional[int] = None,
        active_only: bool = False,
    ) -> Sequence[Student]:
        clauses = ["teacher_id=?"]
        params: list[object] = [int(teacher_id)]

        if class_level is not None:
            clauses.append("class_level=?")
            params.append(int(class_level))
        if active_only:
            clauses.append("active=1")

        where = " AND ".join(clauses)
        rows = self._db.fetchall(
            f"""
            SELECT id, name, class_level, teacher_id, active
            FROM students
            WHERE {where}
            ORDER BY class_level ASC, name ASC
            """,
            tuple(params),
        )
        return [_to_student(r) for r in rows]

    def create(self, *, teacher_id: int, name: str, class_level: int) -> int:
        res = self._db.execute(
            "INSERT INTO students(name, class_level, active, teacher_id) VALUES(?,?,1,?)",
            (name, int(class_level), int(teacher_id)),
        )
        return res.lastrowid

    def set_active(self, student_id: int, *, is_active: bool) -> bool:
        res = self._db.execute("UPDATE students SET active=? WHERE id=?", (1 if is_active else 0, int(student_id)))
        return res.rowcount > 0
