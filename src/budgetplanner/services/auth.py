"""Authentication and user management services."""

from __future__ import annotations

from ..errors import DuplicateUsername, InvalidCredentials, ValidationError
from ..infra.repositories.user import SQLModelUserRepository
from ..logging_config import get_logger
from ..models.user import User
from .passwords import MAX_PASSWORD_BYTES, PasswordHasher

logger = get_logger(__name__)

# Verified against when the username is unknown so both branches cost a hash check.
_DUMMY_PASSWORD = "budgetplanner-timing-guard"

PASSWORD_TOO_LONG = f"Password must be {MAX_PASSWORD_BYTES} bytes or fewer"


class CredentialStore:
    """Registers users and checks their passwords."""

    def __init__(self, repo: SQLModelUserRepository, hasher: PasswordHasher):
        self.repo = repo
        self.hasher = hasher
        self._dummy_hash: str | None = None

    def register(self, username: str, password: str) -> User:
        """Create a new user with a hashed password."""

        username = (username or "").strip()
        errors = []
        if not username:
            errors.append("Username is required")
        if not password:
            errors.append("Password is required")
        elif len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            errors.append(PASSWORD_TOO_LONG)
        if errors:
            raise ValidationError(errors)

        if self.repo.exists(username):
            raise DuplicateUsername(username)

        user = self.repo.create(
            User(username=username, password_hash=self.hasher.hash(password))
        )
        logger.info("Registered user", extra={"user_id": user.id, "username": username})
        return user

    def verify(self, username: str, password: str) -> User:
        """Return the user when the credentials match; raise InvalidCredentials otherwise."""

        username = (username or "").strip()
        user = self.repo.get_by_username(username) if username else None
        if user is None:
            self.hasher.verify(password or "", self._timing_hash())
            logger.info("Login rejected: unknown user", extra={"username": username})
            raise InvalidCredentials(username)
        if not self.hasher.verify(password or "", user.password_hash):
            logger.info("Login rejected: bad password", extra={"username": username})
            raise InvalidCredentials(username)
        return user

    def _timing_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.hasher.hash(_DUMMY_PASSWORD)
        return self._dummy_hash
