"""Server-side login session rows."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class LoginSession(SQLModel, table=True):
    """Maps an opaque token to a user identity until ``expires_at``.

    Timestamps are timezone-aware UTC. SQLite hands them back without tzinfo,
    so readers normalise through ``services.sessions.as_utc``.
    """

    __tablename__: ClassVar[str] = "login_session"

    token: str = Field(primary_key=True, max_length=128)
    user_id: int = Field(nullable=False, index=True)
    username: str = Field(nullable=False, max_length=64)
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    expires_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
