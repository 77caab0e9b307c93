"""SQLModel definition for expense records."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .user import User

DEFAULT_CATEGORY = "Other"


class Expense(SQLModel, table=True):
    """A single expense owned by one user."""

    __tablename__: ClassVar[str] = "expense"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=255)
    amount: Decimal = Field(nullable=False, ge=0, max_digits=12, decimal_places=2)
    category: str = Field(default=DEFAULT_CATEGORY, nullable=False, index=True, max_length=64)
    # Stored as YYYY-MM-DD so lexical order matches calendar order.
    date: str = Field(nullable=False, index=True, max_length=10)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    user: "User" = Relationship(sa_relationship=relationship("User", back_populates="expenses"))
