"""HTTP error pages."""

from __future__ import annotations

from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException, NotFound

from .errors import StorageUnavailable
from .logging_config import get_logger

logger = get_logger(__name__)


def _requested_url() -> str:
    return request.full_path.rstrip("?")


def init_app(app: Flask) -> None:
    """Register 404/500 handlers. Error details stay in the logs."""

    @app.errorhandler(NotFound)
    def not_found(_exc: NotFound):
        return render_template("404.html", url=_requested_url()), 404

    @app.errorhandler(StorageUnavailable)
    def storage_unavailable(exc: StorageUnavailable):
        logger.error("Storage unavailable while handling %s", _requested_url(), exc_info=exc)
        return render_template("500.html"), 500

    @app.errorhandler(Exception)
    def server_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Server error while handling %s", _requested_url())
        return render_template("500.html"), 500
