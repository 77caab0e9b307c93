"""SQLModel-backed key-value store for login sessions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import select

from ...models.session import LoginSession
from ..database import SessionFactory


class SQLModelSessionStore:
    """Stores :class:`LoginSession` rows keyed by token."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get(self, token: str) -> Optional[LoginSession]:
        with self.session_factory() as session:
            row = session.get(LoginSession, token)
            if row:
                session.expunge(row)
            return row

    def save(self, row: LoginSession) -> LoginSession:
        with self.session_factory() as session:
            session.add(row)
            session.flush()
            session.expunge(row)
            return row

    def replace(self, previous_token: Optional[str], row: LoginSession) -> LoginSession:
        """Drop ``previous_token`` and insert ``row`` in a single transaction."""
        with self.session_factory() as session:
            if previous_token:
                old = session.get(LoginSession, previous_token)
                if old is not None:
                    session.delete(old)
            session.add(row)
            session.flush()
            session.expunge(row)
            return row

    def delete(self, token: str) -> None:
        with self.session_factory() as session:
            row = session.get(LoginSession, token)
            if row is not None:
                session.delete(row)

    def purge_expired(self, now: datetime) -> int:
        """Remove every row whose expiry is at or before ``now``."""
        with self.session_factory() as session:
            rows = session.exec(select(LoginSession).where(LoginSession.expires_at <= now)).all()
            for row in rows:
                session.delete(row)
            return len(rows)
