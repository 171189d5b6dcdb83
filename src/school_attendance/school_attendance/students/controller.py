from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.validators import require_class_level
from ..container import Container
from ..core.exceptions import ValidationError
from ..web.context import guru_required


def register(app: Flask, container: Container) -> None:
    def _render_roster(ctx, *, class_level=None, error=None, form=None, status=200):
        students = container.student_service.list_roster(ctx.user_id, class_level=class_level)
        return (
            render_template(
                "guru/students.html",
                students=students,
                class_level=class_level,
                error=error,
                form=form or {},
                current_user=ctx.as_template_user(),
                active_page="guru_students",
            ),
            status,
        )

    @app.route("/guru/students", endpoint="guru_students")
    @guru_required
    def guru_students(ctx):
        raw_level = request.args.get("class_level", "").strip()
        class_level = None
        error = None
        if raw_level:
            try:
                class_level = require_class_level(raw_level)
            except ValidationError as e:
                error = str(e)
        return _render_roster(ctx, class_level=class_level, error=error)

    @app.route("/guru/students/add", methods=["POST"], endpoint="add_student")
    @guru_required
    def add_student(ctx):
        try:
            container.student_service.add_student(
                ctx.user_id,
                name=request.form.get("name", ""),
                class_level=request.form.get("class_level"),
            )
        except ValidationError as e:
            return _render_roster(ctx, error=str(e), form=request.form, status=400)

        flash("Siswa berhasil ditambahkan!", "success")
        return redirect(url_for("guru_students"))

    @app.route("/guru/students/<int:student_id>/toggle", methods=["POST"], endpoint="toggle_student")
    @guru_required
    def toggle_student(ctx, student_id: int):
        active = container.student_service.toggle_active(ctx.user_id, student_id)
        flash("Siswa diaktifkan." if active else "Siswa dinonaktifkan.", "success")
        return redirect(url_for("guru_students"))
