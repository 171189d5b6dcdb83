from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date_or, today_local
from ..container import Container
from ..core.enums import AttendanceStatus, DailyStatus
from ..core.exceptions import ValidationError
from ..web.context import guru_required
from .form import parse_batch_form


def register(app: Flask, container: Container) -> None:
    def _render_sheet(ctx, work_date, *, error=None, status=200):
        rows = container.attendance_service.get_sheet(ctx.user_id, work_date)
        daily = container.daily_status_service.get(ctx.user_id, work_date)
        return (
            render_template(
                "guru/attendance.html",
                rows=rows,
                work_date=work_date.isoformat(),
                daily=daily,
                statuses=list(AttendanceStatus),
                error=error,
                current_user=ctx.as_template_user(),
                active_page="guru_attendance",
            ),
            status,
        )

    @app.route("/guru/attendance", methods=["GET", "POST"], endpoint="guru_attendance")
    @guru_required
    def guru_attendance(ctx):
        if request.method == "GET":
            work_date = parse_iso_date_or(request.args.get("date"), today_local())
            return _render_sheet(ctx, work_date)

        work_date = parse_iso_date_or(request.form.get("date"), today_local())
        students = container.student_service.list_roster(ctx.user_id, active_only=True)
        try:
            submissions = parse_batch_form(request.form, [s.student_id for s in students])
        except ValidationError as e:
            return _render_sheet(ctx, work_date, error=str(e), status=400)

        # Failures here roll back the whole batch and reach the 500 handler.
        result = container.attendance_service.record_batch(ctx.user_id, work_date, submissions)
        flash(f"Absensi {result.work_date.isoformat()} tersimpan ({result.written} siswa).", "success")
        return redirect(url_for("guru_attendance", date=work_date.isoformat()))

    @app.route("/guru/status", methods=["GET", "POST"], endpoint="guru_status")
    @guru_required
    def guru_status(ctx):
        error = None
        if request.method == "POST":
            work_date = parse_iso_date_or(request.form.get("date"), today_local())
            try:
                status = container.daily_status_service.parse_status(request.form.get("status"))
                container.daily_status_service.set_status(
                    ctx.user_id,
                    status,
                    work_date=work_date,
                    reason=request.form.get("reason"),
                )
                flash("Status harian tersimpan.", "success")
                return redirect(url_for("guru_status", date=work_date.isoformat()))
            except ValidationError as e:
                error = str(e)
        else:
            work_date = parse_iso_date_or(request.args.get("date"), today_local())

        daily = container.daily_status_service.get(ctx.user_id, work_date)
        return render_template(
            "guru/status.html",
            daily=daily,
            work_date=work_date.isoformat(),
            statuses=list(DailyStatus),
            error=error,
            current_user=ctx.as_template_user(),
            active_page="guru_status",
        ), (400 if error else 200)
