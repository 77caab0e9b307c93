"""Registration, login and logout routes."""

from __future__ import annotations

from flask import redirect, render_template, request, url_for

from ...errors import (
    DuplicateUsername,
    InvalidCredentials,
    SessionError,
    StorageUnavailable,
    ValidationError,
)
from ...extensions import get_services
from ...guards import clear_session_cookie, session_token, set_session_cookie
from ...logging_config import get_logger
from . import bp

logger = get_logger(__name__)

USERNAME_TAKEN = "Username already exists"
REGISTRATION_FAILED = "Registration failed"
INVALID_LOGIN = "Invalid username or password"
LOGIN_FAILED = "Login failed"


@bp.get("/register")
def register_form():
    return render_template("register.html", error=None)


@bp.post("/register")
def register():
    """Create an account and send the user to the login page."""

    username = request.form.get("username", "")
    password = request.form.get("password", "")
    try:
        get_services().credentials.register(username, password)
    except DuplicateUsername:
        return render_template("register.html", error=USERNAME_TAKEN), 409
    except ValidationError as exc:
        logger.info("Registration rejected", extra={"errors": exc.messages})
        return render_template("register.html", error=REGISTRATION_FAILED), 400
    except StorageUnavailable:
        logger.exception("Registration failed")
        return render_template("register.html", error=REGISTRATION_FAILED), 503
    return redirect(url_for("auth.login"))


@bp.get("/login")
def login_form():
    return render_template("login.html", error=None)


@bp.post("/login")
def login():
    """Check credentials, rotate the session and set the cookie."""

    services = get_services()
    username = request.form.get("username", "")
    password = request.form.get("password", "")
    try:
        user = services.credentials.verify(username, password)
        identity = services.sessions.create(
            user.id, user.username, previous_token=session_token()
        )
    except InvalidCredentials:
        return render_template("login.html", error=INVALID_LOGIN), 401
    except (SessionError, StorageUnavailable):
        logger.exception("Login failed")
        return render_template("login.html", error=LOGIN_FAILED), 503

    logger.info("User logged in", extra={"user_id": identity.user_id})
    return set_session_cookie(redirect(url_for("home.index")), identity)


@bp.get("/logout")
def logout():
    get_services().sessions.destroy(session_token())
    return clear_session_cookie(redirect(url_for("auth.login")))
