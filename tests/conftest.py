"""Pytest configuration and shared fixtures for Budget Planner tests.

Provides throwaway SQLite databases, repositories wired to them, and a Flask
app/client pair whose data directory lives under ``tmp_path``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from budgetplanner import create_app
from budgetplanner.infra.database import create_session_factory
from budgetplanner.infra.repositories import (
    SQLModelExpenseRepository,
    SQLModelPaycheckRepository,
    SQLModelSessionStore,
    SQLModelUserRepository,
)
from budgetplanner.models import User
from tests.helpers import FakeClock, FakeHasher, login, register

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path: Path):
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Transactional session factory matching what the app uses."""

    return create_session_factory(db_engine)


@pytest.fixture
def user_repo(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


@pytest.fixture
def expense_repo(session_factory) -> SQLModelExpenseRepository:
    return SQLModelExpenseRepository(session_factory)


@pytest.fixture
def paycheck_repo(session_factory) -> SQLModelPaycheckRepository:
    return SQLModelPaycheckRepository(session_factory)


@pytest.fixture
def session_store(session_factory) -> SQLModelSessionStore:
    return SQLModelSessionStore(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(user_repo):
    """Factory for persisted users with a placeholder hash."""

    def _create_user(username: str = "tester") -> User:
        return user_repo.create(User(username=username, password_hash="dummy-hash"))

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    """A default owner for scoping data."""

    return user_factory("tester")


@pytest.fixture
def other_user(user_factory) -> User:
    return user_factory("someone-else")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def fake_hasher() -> FakeHasher:
    return FakeHasher()


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BUDGETPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETPLANNER_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("BUDGETPLANNER_PASSWORD_HASHER", "bcrypt")
    app = create_app("testing")
    yield app
    app.extensions["budgetplanner"].engine.dispose()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def services(app):
    """The service registry attached to ``app``."""

    return app.extensions["budgetplanner"]


@pytest.fixture()
def logged_in_client(client):
    """Client with a registered and signed-in user ``alice``."""

    register(client)
    response = login(client)
    assert response.status_code == 302
    return client
