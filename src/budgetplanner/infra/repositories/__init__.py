"""Concrete repository implementations using SQLModel."""

from .expense import SQLModelExpenseRepository
from .paycheck import SQLModelPaycheckRepository
from .session import SQLModelSessionStore
from .user import SQLModelUserRepository

__all__ = [
    "SQLModelExpenseRepository",
    "SQLModelPaycheckRepository",
    "SQLModelSessionStore",
    "SQLModelUserRepository",
]
