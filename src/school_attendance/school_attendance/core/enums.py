from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for access control."""

    ADMIN = "ADMIN"
    GURU = "GURU"


class AttendanceStatus(str, Enum):
    """Per-student attendance status for a given date."""

    PRESENT = "PRESENT"
    SICK = "SICK"
    EXCUSED = "EXCUSED"


class DailyStatus(str, Enum):
    """Whether a teacher finished the attendance entry for a date."""

    DONE = "DONE"
    NOT_DONE = "NOT_DONE"
