from __future__ import annotations

import csv
import io
from datetime import date, datetime

from src.school_attendance.school_attendance.attendance.model import StudentSubmission
from src.school_attendance.school_attendance.core.constants import EXPORT_CSV_HEADER
from src.school_attendance.school_attendance.core.enums import AttendanceStatus, DailyStatus

DAY = date(2024, 3, 1)


def _record(container, teacher_id, submissions, day=DAY):
    container.attendance_service.record_batch(
        teacher_id, day, submissions, now=datetime(day.year, day.month, day.day, 8, 0, 0)
    )


def test_csv_header_and_reason_commas(container, make_teacher):
    teacher_id = make_teacher()
    sid = container.student_service.add_student(teacher_id, name="Andi", class_level=7)
    _record(
        container,
        teacher_id,
        {
            sid: StudentSubmission(
                status=AttendanceStatus.EXCUSED,
                excused_start_date="2024-03-01",
                excused_days="2",
                excused_reason="acara keluarga, di luar kota",
            )
        },
    )

    content = container.report_service.export_csv(start=DAY, end=DAY)
    lines = content.splitlines()

    assert lines[0] == ",".join(EXPORT_CSV_HEADER)
    assert lines[0].startswith("Tanggal,Guru,Siswa,Kelas,Status")
    assert len(lines) == 2

    row = next(csv.reader(io.StringIO(lines[1])))
    assert row == [
        "2024-03-01",
        "Bu Sari",
        "Andi",
        "7",
        "EXCUSED",
        "",
        "2024-03-01",
        "2",
        "acara keluarga; di luar kota",
        "2024-03-01 08:00:00",
    ]


def test_attendance_rows_filters_by_class_and_date_range(container, make_teacher):
    teacher_id = make_teacher()
    a = container.student_service.add_student(teacher_id, name="Andi", class_level=7)
    b = container.student_service.add_student(teacher_id, name="Budi", class_level=8)
    both = {a: StudentSubmission(status=AttendanceStatus.PRESENT), b: StudentSubmission(status=AttendanceStatus.SICK)}
    _record(container, teacher_id, both, day=date(2024, 3, 1))
    _record(container, teacher_id, both, day=date(2024, 3, 4))

    rows = container.report_service.attendance_rows(start=date(2024, 3, 1), end=date(2024, 3, 4), class_level=8)

    assert [(r.work_date, r.student_name) for r in rows] == [
        (date(2024, 3, 4), "Budi"),
        (date(2024, 3, 1), "Budi"),
    ]
    assert container.report_service.attendance_rows(start=date(2024, 3, 2), end=date(2024, 3, 3)) == []


def test_daily_overview_lists_active_teachers_with_status_and_counts(container, make_teacher):
    done = make_teacher("guru1", name="Bu Sari")
    pending = make_teacher("guru2", name="Pak Budi")
    idle = make_teacher("guru3", name="Bu Rina")
    retired = make_teacher("guru4", name="Pak Tua")
    container.user_service.toggle_active(retired)

    a = container.student_service.add_student(done, name="Andi", class_level=7)
    b = container.student_service.add_student(done, name="Budi", class_level=7)
    _record(
        container,
        done,
        {a: StudentSubmission(status=AttendanceStatus.PRESENT), b: StudentSubmission(status=AttendanceStatus.SICK)},
    )
    container.daily_status_service.set_status(pending, DailyStatus.NOT_DONE, work_date=DAY, reason="rapat")

    overview = {o.teacher_id: o for o in container.report_service.daily_overview(DAY)}

    assert set(overview) == {done, pending, idle}
    assert overview[done].status == "DONE"
    assert overview[done].counts == {"PRESENT": 1, "SICK": 1, "EXCUSED": 0}
    assert overview[done].total == 2
    assert overview[pending].status == "NOT_DONE"
    assert overview[pending].reason == "rapat"
    assert overview[idle].status is None
    assert overview[idle].total == 0
