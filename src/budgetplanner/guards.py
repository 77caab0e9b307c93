"""Request identity loading and the login gate."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar

from flask import Flask, current_app, g, redirect, request, url_for
from werkzeug.wrappers import Response

from .errors import Unauthenticated
from .extensions import get_services
from .services.sessions import SessionIdentity

F = TypeVar("F", bound=Callable)


def session_token() -> Optional[str]:
    """Token from the auth cookie, if any."""

    return request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])


def current_identity() -> Optional[SessionIdentity]:
    return g.get("identity")


def _load_identity() -> None:
    g.identity = None
    token = session_token()
    if not token:
        return
    try:
        g.identity = get_services().sessions.validate(token)
    except Unauthenticated:
        g.identity = None


def login_required(view: F) -> F:
    """Redirect to the login page unless the request carries a valid session."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if current_identity() is None:
            return redirect(url_for("auth.login"))
        return view(*args, **kwargs)

    return wrapped  # type: ignore[return-value]


def set_session_cookie(response: Response, identity: SessionIdentity) -> Response:
    config = current_app.config
    response.set_cookie(
        config["AUTH_COOKIE_NAME"],
        identity.token,
        max_age=config["SESSION_LIFETIME_SECONDS"],
        httponly=True,
        samesite="Lax",
        secure=config["COOKIE_SECURE"],
    )
    return response


def clear_session_cookie(response: Response) -> Response:
    config = current_app.config
    response.delete_cookie(
        config["AUTH_COOKIE_NAME"],
        httponly=True,
        samesite="Lax",
        secure=config["COOKIE_SECURE"],
    )
    return response


def init_app(app: Flask) -> None:
    app.before_request(_load_identity)

    @app.context_processor
    def _inject_identity() -> dict:
        return {"identity": current_identity()}
