"""Login sessions: issue, validate and destroy opaque tokens."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Protocol

from ..errors import SessionError, StorageUnavailable, Unauthenticated
from ..logging_config import get_logger
from ..models.session import LoginSession

logger = get_logger(__name__)

SESSION_LIFETIME_SECONDS = 3600


class SessionStore(Protocol):
    """Key-value storage for session rows, keyed by token."""

    def get(self, token: str) -> Optional[LoginSession]:  # pragma: no cover - interface
        ...

    def save(self, row: LoginSession) -> LoginSession:  # pragma: no cover - interface
        ...

    def replace(
        self, previous_token: Optional[str], row: LoginSession
    ) -> LoginSession:  # pragma: no cover - interface
        ...

    def delete(self, token: str) -> None:  # pragma: no cover - interface
        ...

    def purge_expired(self, now: datetime) -> int:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class SessionIdentity:
    """Identity bound to a valid session token."""

    token: str
    user_id: int
    username: str
    expires_at: datetime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps read back without tzinfo (SQLite drops it)."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SessionManager:
    """Issues fixed-lifetime session tokens backed by an injected store."""

    def __init__(
        self,
        store: SessionStore,
        *,
        lifetime_seconds: int = SESSION_LIFETIME_SECONDS,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.lifetime = timedelta(seconds=lifetime_seconds)
        self.clock = clock

    def create(
        self, user_id: int, username: str, *, previous_token: Optional[str] = None
    ) -> SessionIdentity:
        """Rotate away ``previous_token`` and issue a fresh token for the user."""

        issued_at = self.clock()
        row = LoginSession(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            username=username,
            created_at=issued_at,
            expires_at=issued_at + self.lifetime,
        )
        try:
            saved = self.store.replace(previous_token, row)
        except StorageUnavailable as exc:
            logger.error("Session regeneration failed", extra={"user_id": user_id})
            raise SessionError("could not regenerate session") from exc
        logger.info("Session issued", extra={"user_id": user_id})
        return SessionIdentity(
            token=saved.token,
            user_id=saved.user_id,
            username=saved.username,
            expires_at=saved.expires_at,
        )

    def validate(self, token: Optional[str]) -> SessionIdentity:
        """Return the identity bound to ``token`` or raise Unauthenticated."""

        if not token:
            raise Unauthenticated("no session token")
        row = self.store.get(token)
        if row is None:
            raise Unauthenticated("unknown session token")
        expires_at = as_utc(row.expires_at)
        if self.clock() >= expires_at:
            self.store.delete(token)
            raise Unauthenticated("session expired")
        return SessionIdentity(
            token=row.token,
            user_id=row.user_id,
            username=row.username,
            expires_at=expires_at,
        )

    def destroy(self, token: Optional[str]) -> None:
        """Invalidate ``token``; unknown or empty tokens are ignored."""

        if not token:
            return
        self.store.delete(token)
        logger.info("Session destroyed")

    def purge_expired(self) -> int:
        """Delete every expired session row and return how many were removed."""

        removed = self.store.purge_expired(self.clock())
        if removed:
            logger.info("Purged expired sessions", extra={"count": removed})
        return removed
