"""Pluggable password hashing."""

from __future__ import annotations

from typing import Protocol

import bcrypt
from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError

DEFAULT_BCRYPT_ROUNDS = 10
# bcrypt only reads the first 72 bytes; bcrypt 5 rejects anything longer.
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    """Hash and verify passwords without exposing the algorithm to callers."""

    def hash(self, plain: str) -> str:  # pragma: no cover - interface
        ...

    def verify(self, plain: str, stored: str) -> bool:  # pragma: no cover - interface
        ...


class BcryptPasswordHasher:
    """bcrypt with a random per-record salt and a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plain: str, stored: str) -> bool:
        # checkpw compares in constant time
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), stored.encode("utf-8"))
        except ValueError:
            return False


class Argon2PasswordHasher:
    """argon2id via argon2-cffi."""

    def __init__(self, hasher: _Argon2Hasher | None = None):
        self._hasher = hasher or _Argon2Hasher()

    def hash(self, plain: str) -> str:
        return self._hasher.hash(plain)

    def verify(self, plain: str, stored: str) -> bool:
        try:
            return self._hasher.verify(stored, plain)
        except (VerifyMismatchError, InvalidHash, VerificationError):
            return False


def build_hasher(name: str, *, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS) -> PasswordHasher:
    """Return the hasher registered under ``name`` (``bcrypt`` or ``argon2``)."""

    if name == "bcrypt":
        return BcryptPasswordHasher(rounds=bcrypt_rounds)
    if name == "argon2":
        return Argon2PasswordHasher()
    raise ValueError(f"Unknown password hasher: {name}")
