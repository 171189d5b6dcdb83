from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_for_teacher(
        self,
        teacher_id: int,
        *,
        class_level: Optional[int] = None,
        active_only: bool = False,
    ) -> Sequence[Student]:
        """Students owned by a teacher, ordered by class level then name."""

        raise NotImplementedError

    def create(self, *, teacher_id: int, name: str, class_level: int) -> int:
        raise NotImplementedError

    def set_active(self, student_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
