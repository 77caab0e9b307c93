"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def normalize_database_url(url: str) -> str:
    """Rewrite legacy ``postgres://`` URLs into the form SQLAlchemy accepts."""

    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Budget Planner"
    DB_FILENAME = "budgetplanner.db"
    SESSION_LIFETIME_SECONDS = 3600
    BCRYPT_ROUNDS = 10
    # Flask's own cookie, used for flash messages
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("BUDGETPLANNER_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("BUDGETPLANNER_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DATABASE_URL = normalize_database_url(
            os.getenv("BUDGETPLANNER_DATABASE_URL", self._build_sqlite_url())
        )
        self.AUTH_COOKIE_NAME = os.getenv("BUDGETPLANNER_SESSION_COOKIE", "budget_session")
        self.COOKIE_SECURE = _env_bool("BUDGETPLANNER_COOKIE_SECURE", default=False)
        self.PASSWORD_HASHER = os.getenv("BUDGETPLANNER_PASSWORD_HASHER", "bcrypt").strip().lower()
        self.PORT = int(os.getenv("PORT", "3000"))
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("BUDGETPLANNER_SECRET_KEY must be set in non-dev mode.")
        if self.PASSWORD_HASHER not in {"bcrypt", "argon2"}:
            raise ValueError(f"Unsupported password hasher: {self.PASSWORD_HASHER}")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("BUDGETPLANNER_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    TESTING = True
    # bcrypt's minimum work factor
    BCRYPT_ROUNDS = 4
