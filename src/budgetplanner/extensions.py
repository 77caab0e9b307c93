"""Database and service wiring for the Flask app."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import (
    SQLModelExpenseRepository,
    SQLModelPaycheckRepository,
    SQLModelSessionStore,
    SQLModelUserRepository,
)
from .services.auth import CredentialStore
from .services.income import IncomeStore
from .services.ledger import LedgerStore
from .services.passwords import build_hasher
from .services.sessions import SessionManager

EXTENSION_KEY = "budgetplanner"


@dataclass
class Services:
    """Per-app service registry stored in ``app.extensions``."""

    engine: Engine
    session_factory: SessionFactory
    credentials: CredentialStore
    sessions: SessionManager
    ledger: LedgerStore
    income: IncomeStore


def build_services(config: BaseConfig) -> Services:
    """Create the engine, schema and every store for ``config``."""

    engine, session_factory = bootstrap_database(config)
    hasher = build_hasher(config.PASSWORD_HASHER, bcrypt_rounds=config.BCRYPT_ROUNDS)
    return Services(
        engine=engine,
        session_factory=session_factory,
        credentials=CredentialStore(SQLModelUserRepository(session_factory), hasher),
        sessions=SessionManager(
            SQLModelSessionStore(session_factory),
            lifetime_seconds=config.SESSION_LIFETIME_SECONDS,
        ),
        ledger=LedgerStore(SQLModelExpenseRepository(session_factory)),
        income=IncomeStore(SQLModelPaycheckRepository(session_factory)),
    )


def init_app(app: Flask) -> None:
    """Attach a service registry built from the app's config."""

    config: BaseConfig = app.config["BUDGETPLANNER_CONFIG"]
    app.extensions[EXTENSION_KEY] = build_services(config)


def get_services() -> Services:
    """Return the registry for the active app."""

    services = current_app.extensions.get(EXTENSION_KEY)
    if services is None:  # pragma: no cover - misconfigured app
        raise RuntimeError("Services not initialized")
    return services
