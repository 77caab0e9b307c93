"""SQLModel table exports."""

from .expense import Expense
from .paycheck import Paycheck
from .session import LoginSession
from .user import User

__all__ = [
    "Expense",
    "LoginSession",
    "Paycheck",
    "User",
]
