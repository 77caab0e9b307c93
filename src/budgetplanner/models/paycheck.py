"""SQLModel definition for paychecks."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .user import User

DEFAULT_DESCRIPTION = "Paycheck"


class Paycheck(SQLModel, table=True):
    """Income received by a user."""

    __tablename__: ClassVar[str] = "paycheck"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    amount: Decimal = Field(nullable=False, ge=0, max_digits=12, decimal_places=2)
    description: str = Field(default=DEFAULT_DESCRIPTION, nullable=False, max_length=255)
    date: dt.date = Field(default_factory=dt.date.today, nullable=False, index=True)
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
    )

    user: "User" = Relationship(sa_relationship=relationship("User", back_populates="paychecks"))
