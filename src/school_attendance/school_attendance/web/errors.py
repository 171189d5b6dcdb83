from __future__ import annotations

import logging

from flask import Flask, render_template
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthorizationError, NotFoundError
from .context import current_context, render_forbidden

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AuthorizationError)
    def handle_forbidden(e: AuthorizationError):
        logger.info("Forbidden: %s", e)
        return render_forbidden(current_context())

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return render_template("error.html", code=404, message=str(e)), 404

    @app.errorhandler(404)
    def handle_404(e):
        return render_template("error.html", code=404, message="Halaman tidak ditemukan"), 404

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return render_template("error.html", code=500, message=f"Terjadi kesalahan: {e}"), 500
