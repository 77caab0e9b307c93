"""Exception taxonomy shared by services and routes."""

from __future__ import annotations

from typing import Iterable


class BudgetPlannerError(Exception):
    """Base class for application errors."""


class ValidationError(BudgetPlannerError):
    """User input broke one or more validation rules.

    ``messages`` carries every violated rule, in the order they were checked.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class DuplicateUsername(BudgetPlannerError):
    """A user with the requested username already exists."""


class InvalidCredentials(BudgetPlannerError):
    """Unknown username or wrong password."""


class Unauthenticated(BudgetPlannerError):
    """No valid session is attached to the request."""


class SessionError(BudgetPlannerError):
    """The session store could not issue or rotate a session."""


class StorageUnavailable(BudgetPlannerError):
    """The persistence layer failed."""


__all__ = [
    "BudgetPlannerError",
    "DuplicateUsername",
    "InvalidCredentials",
    "SessionError",
    "StorageUnavailable",
    "Unauthenticated",
    "ValidationError",
]
