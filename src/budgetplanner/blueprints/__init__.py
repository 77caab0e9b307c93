"""Blueprint exports."""

from . import auth, home, ledger, paychecks

__all__ = [
    "auth",
    "home",
    "ledger",
    "paychecks",
]
