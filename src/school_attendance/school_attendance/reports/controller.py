from __future__ import annotations

from datetime import date

from flask import Flask, render_template, request

from ..common.datetime_utils import parse_iso_date_or, today_local
from ..common.validators import require_class_level
from ..container import Container
from ..core.constants import CLASS_LEVELS
from ..core.exceptions import ValidationError
from ..web.context import admin_required


def register(app: Flask, container: Container) -> None:
    def _filters() -> dict:
        day = parse_iso_date_or(request.args.get("date"), today_local())
        start = parse_iso_date_or(request.args.get("start"), day)
        end = parse_iso_date_or(request.args.get("end"), day)
        if end < start:
            start, end = end, start

        teacher_id = request.args.get("teacher_id", type=int) or None

        class_level = None
        raw_level = (request.args.get("class_level") or "").strip()
        if raw_level:
            try:
                class_level = require_class_level(raw_level)
            except ValidationError:
                class_level = None

        return {"date": day, "start": start, "end": end, "teacher_id": teacher_id, "class_level": class_level}

    def _fmt(d: date) -> str:
        return d.strftime("%Y%m%d")

    @app.route("/admin/monitoring", endpoint="admin_monitoring")
    @admin_required
    def admin_monitoring(ctx):
        f = _filters()
        overview = container.report_service.daily_overview(f["date"])
        rows = container.report_service.attendance_rows(
            start=f["start"],
            end=f["end"],
            teacher_id=f["teacher_id"],
            class_level=f["class_level"],
        )
        return render_template(
            "admin/monitoring.html",
            overview=overview,
            rows=rows,
            teachers=container.user_service.list_teachers(),
            class_levels=CLASS_LEVELS,
            date=f["date"].isoformat(),
            start=f["start"].isoformat(),
            end=f["end"].isoformat(),
            teacher_id=f["teacher_id"],
            class_level=f["class_level"],
            current_user=ctx.as_template_user(),
            active_page="admin_monitoring",
        )

    @app.route("/admin/export.csv", endpoint="admin_export_csv")
    @admin_required
    def admin_export_csv(ctx):
        f = _filters()
        content = container.report_service.export_csv(
            start=f["start"],
            end=f["end"],
            teacher_id=f["teacher_id"],
            class_level=f["class_level"],
        )
        filename = f"absensi_{_fmt(f['start'])}_{_fmt(f['end'])}.csv"
        return app.response_class(
            content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
