"""Domain services: credentials, sessions, ledger, income, summary and reports."""

from .auth import CredentialStore
from .income import IncomeStore
from .ledger import LedgerStore
from .sessions import SessionIdentity, SessionManager

__all__ = [
    "CredentialStore",
    "IncomeStore",
    "LedgerStore",
    "SessionIdentity",
    "SessionManager",
]
