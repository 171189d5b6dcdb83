from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role
from ..users.service import SessionUser


@dataclass(frozen=True)
class RequestContext:
    """Authenticated identity for the current request, handed to each view."""

    user_id: int
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def as_template_user(self) -> dict:
        return {"name": self.name, "role": self.role.value}


def start_session(user: SessionUser, *, permanent: bool = False) -> None:
    session.clear()
    session.permanent = permanent
    session["user_id"] = user.user_id
    session["name"] = user.name
    session["role"] = user.role.value


def current_context() -> Optional[RequestContext]:
    if "user_id" not in session:
        return None
    try:
        role = Role(session.get("role"))
    except ValueError:
        return None
    return RequestContext(user_id=int(session["user_id"]), name=session.get("name") or "", role=role)


def render_forbidden(ctx: Optional[RequestContext] = None):
    current_user = ctx.as_template_user() if ctx else None
    return render_template("403.html", current_user=current_user), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_context()
        if ctx is None:
            flash("Silakan login terlebih dahulu.", "warning")
            return redirect(url_for("login"))
        return view(ctx, *args, **kwargs)

    return wrapper


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = current_context()
            if ctx is None:
                return redirect(url_for("login"))
            if ctx.role != role:
                return render_forbidden(ctx)
            return view(ctx, *args, **kwargs)

        return wrapper

    return decorator


admin_required = role_required(Role.ADMIN)
guru_required = role_required(Role.GURU)
