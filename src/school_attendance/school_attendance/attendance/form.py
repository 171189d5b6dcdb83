from __future__ import annotations

from typing import Iterable, Mapping

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import StudentSubmission


def field_name(prefix: str, student_id: int) -> str:
    return f"{prefix}_{int(student_id)}"


def _parse_status(value: str | None, student_id: int) -> AttendanceStatus | None:
    v = (value or "").strip().upper()
    if not v:
        return None
    try:
        return AttendanceStatus(v)
    except ValueError:
        raise ValidationError(f"Status tidak valid untuk siswa #{student_id}: {value}")


def parse_batch_form(form: Mapping[str, str], student_ids: Iterable[int]) -> dict[int, StudentSubmission]:
    """Turn posted fields into an explicit student_id -> submission mapping.

    Expected fields per student: status_<id>, sick_date_<id>, excused_start_<id>,
    excused_days_<id>, excused_reason_<id>. Students without any status field
    are left out of the mapping.
    """

    out: dict[int, StudentSubmission] = {}
    for sid in student_ids:
        status = _parse_status(form.get(field_name("status", sid)), sid)
        if status is None:
            continue
        out[int(sid)] = StudentSubmission(
            status=status,
            sick_date=form.get(field_name("sick_date", sid)),
            excused_start_date=form.get(field_name("excused_start", sid)),
            excused_days=form.get(field_name("excused_days", sid)),
            excused_reason=form.get(field_name("excused_reason", sid)),
        )
    return out
