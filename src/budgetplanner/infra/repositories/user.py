"""SQLModel implementation of the user repository."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from ...errors import DuplicateUsername
from ...models.user import User
from ..database import SessionFactory


class SQLModelUserRepository:
    """SQLModel-based user repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_username(self, username: str) -> Optional[User]:
        """Fetch a user by exact (case-sensitive) username."""
        with self.session_factory() as session:
            user = session.exec(select(User).where(User.username == username)).first()
            if user:
                session.expunge(user)
            return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self.session_factory() as session:
            user = session.get(User, user_id)
            if user:
                session.expunge(user)
            return user

    def exists(self, username: str) -> bool:
        with self.session_factory() as session:
            return session.exec(select(User.id).where(User.username == username)).first() is not None

    def create(self, user: User) -> User:
        """Insert ``user``; a unique-index violation becomes DuplicateUsername."""
        with self.session_factory() as session:
            session.add(user)
            try:
                session.flush()
            except IntegrityError as exc:
                raise DuplicateUsername(user.username) from exc
            session.refresh(user)
            session.expunge(user)
            return user
