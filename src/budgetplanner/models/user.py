"""User model supporting authentication."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .expense import Expense
    from .paycheck import Paycheck


class User(SQLModel, table=True):
    """Application user with hashed credentials."""

    __tablename__: ClassVar[str] = "user"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(nullable=False, unique=True, index=True, max_length=64)
    password_hash: str = Field(nullable=False, max_length=255)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    expenses: list["Expense"] = Relationship(
        sa_relationship=relationship("Expense", back_populates="user", cascade="all, delete-orphan"),
    )
    paychecks: list["Paycheck"] = Relationship(
        sa_relationship=relationship("Paycheck", back_populates="user", cascade="all, delete-orphan"),
    )
