from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..web.context import admin_required, current_context, login_required, start_session

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_context() is not None:
            return redirect(url_for("dashboard"))

        error = None
        username = ""
        if request.method == "POST":
            username = request.form.get("username", "").strip()
            password = request.form.get("password", "")
            try:
                s_user = container.auth_service.authenticate(username, password)
                start_session(s_user, permanent=bool(request.form.get("remember_me")))
                flash("Login berhasil!", "success")
                return redirect(url_for("dashboard"))
            except (ValidationError, AuthenticationError) as e:
                logger.info("Failed login for %r: %s", username, e)
                error = str(e)

        return render_template("login.html", error=error, username=username)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Anda telah logout.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard(ctx):
        if ctx.role == Role.ADMIN:
            return redirect(url_for("admin_monitoring"))
        return redirect(url_for("guru_attendance"))

    @app.route("/admin/teachers", endpoint="admin_teachers")
    @admin_required
    def admin_teachers(ctx):
        teachers = container.user_service.list_teachers()
        return render_template(
            "admin/teachers.html",
            teachers=teachers,
            current_user=ctx.as_template_user(),
            active_page="admin_teachers",
        )

    @app.route("/admin/teachers/add", methods=["GET", "POST"], endpoint="add_teacher")
    @admin_required
    def add_teacher(ctx):
        error = None
        form = request.form if request.method == "POST" else {}
        if request.method == "POST":
            try:
                container.user_service.create_teacher(
                    name=form.get("name", ""),
                    username=form.get("username", ""),
                    password=form.get("password", ""),
                    email=form.get("email"),
                    subject=form.get("subject"),
                )
                flash("Guru berhasil ditambahkan!", "success")
                return redirect(url_for("admin_teachers"))
            except ValidationError as e:
                error = str(e)

        return render_template(
            "admin/teacher_form.html",
            teacher=None,
            form=form,
            error=error,
            current_user=ctx.as_template_user(),
            active_page="admin_teachers",
        )

    @app.route("/admin/teachers/<int:user_id>/edit", methods=["GET", "POST"], endpoint="edit_teacher")
    @admin_required
    def edit_teacher(ctx, user_id: int):
        teacher = container.user_service.get_teacher(user_id)
        error = None
        form = request.form if request.method == "POST" else {
            "name": teacher.name,
            "email": teacher.email or "",
            "subject": teacher.subject or "",
        }
        if request.method == "POST":
            try:
                container.user_service.update_teacher(
                    user_id,
                    name=form.get("name", ""),
                    email=form.get("email"),
                    subject=form.get("subject"),
                    new_password=form.get("password") or None,
                )
                flash("Data guru diperbarui.", "success")
                return redirect(url_for("admin_teachers"))
            except ValidationError as e:
                error = str(e)

        return render_template(
            "admin/teacher_form.html",
            teacher=teacher,
            form=form,
            error=error,
            current_user=ctx.as_template_user(),
            active_page="admin_teachers",
        )

    @app.route("/admin/teachers/<int:user_id>/toggle", methods=["POST"], endpoint="toggle_teacher")
    @admin_required
    def toggle_teacher(ctx, user_id: int):
        active = container.user_service.toggle_active(user_id)
        flash("Guru diaktifkan." if active else "Guru dinonaktifkan.", "success")
        return redirect(url_for("admin_teachers"))
