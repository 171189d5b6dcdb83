from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on one teacher's roster."""

    student_id: int
    name: str
    class_level: int
    teacher_id: int
    is_active: bool = True
