from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging
from .container import build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, ensure_default_admin
from .database.connection import create_database
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users
from .web.errors import register_error_handlers

logger = logging.getLogger(__name__)


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__, template_folder="../../../templates")
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(settings.get("SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    # CSRF is not handled by this app; templates still call csrf_token().
    app.jinja_env.globals["csrf_token"] = lambda: ""

    db = create_database(
        backend=settings.get("DB_BACKEND", "sqlite"),
        sqlite_path=settings.get("SQLITE_PATH"),
        db_config=settings.get("DB_CONFIG"),
    )
    logger.info("Starting with settings=%s backend=%s", settings["SETTINGS_MODULE"], db.dialect)

    if settings.get("AUTO_INIT_DB", False):
        apply_schema(db)
    if settings.get("AUTO_SEED_DB", False):
        ensure_default_admin(db)

    container = build_container(db=db)
    app.extensions["container"] = container

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_error_handlers(app)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "OK"}), 200

    return app
