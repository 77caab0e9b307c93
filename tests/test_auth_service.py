"""Tests for the credential store."""

from __future__ import annotations

import pytest
from sqlmodel import SQLModel, create_engine

from budgetplanner.errors import DuplicateUsername, InvalidCredentials, ValidationError
from budgetplanner.infra.database import create_session_factory
from budgetplanner.infra.repositories import SQLModelUserRepository
from budgetplanner.services.auth import CredentialStore
from budgetplanner.services.passwords import BcryptPasswordHasher


@pytest.fixture
def credentials(user_repo, fake_hasher) -> CredentialStore:
    return CredentialStore(user_repo, fake_hasher)


def test_register_stores_only_the_hash(credentials, user_repo):
    user = credentials.register("  alice  ", "s3cret")

    assert user.id is not None
    assert user.username == "alice"
    stored = user_repo.get_by_username("alice")
    assert stored is not None
    assert stored.password_hash != "s3cret"


def test_register_duplicate_username(credentials):
    credentials.register("alice", "one")
    with pytest.raises(DuplicateUsername):
        credentials.register("alice", "two")


def test_username_is_case_sensitive(credentials):
    credentials.register("alice", "one")
    user = credentials.register("Alice", "two")
    assert user.username == "Alice"


def test_register_requires_username_and_password(credentials):
    with pytest.raises(ValidationError) as excinfo:
        credentials.register("   ", "")
    assert excinfo.value.messages == ["Username is required", "Password is required"]


def test_verify_returns_user(credentials):
    created = credentials.register("alice", "s3cret")
    user = credentials.verify("alice", "s3cret")
    assert user.id == created.id


@pytest.mark.parametrize(
    "username, password",
    [("alice", "wrong"), ("bob", "s3cret"), ("", "s3cret"), ("alice", "")],
)
def test_verify_rejects_bad_credentials(credentials, username, password):
    credentials.register("alice", "s3cret")
    with pytest.raises(InvalidCredentials):
        credentials.verify(username, password)


def test_hash_survives_a_new_engine(tmp_path):
    """Credentials registered through one engine verify through another."""

    url = f"sqlite:///{tmp_path / 'restart.db'}"
    hasher = BcryptPasswordHasher(rounds=4)

    first_engine = create_engine(url)
    SQLModel.metadata.create_all(first_engine)
    CredentialStore(
        SQLModelUserRepository(create_session_factory(first_engine)), hasher
    ).register("alice", "p")
    first_engine.dispose()

    second_engine = create_engine(url)
    restarted = CredentialStore(
        SQLModelUserRepository(create_session_factory(second_engine)),
        BcryptPasswordHasher(rounds=4),
    )
    assert restarted.verify("alice", "p").username == "alice"
    with pytest.raises(InvalidCredentials):
        restarted.verify("alice", "wrong")
    second_engine.dispose()


def test_register_rejects_password_longer_than_bcrypt_reads(credentials, user_repo):
    with pytest.raises(ValidationError) as excinfo:
        credentials.register("alice", "p" * 73)

    assert excinfo.value.messages == ["Password must be 72 bytes or fewer"]
    assert user_repo.get_by_username("alice") is None


def test_register_accepts_password_at_the_limit(credentials):
    user = credentials.register("alice", "é" * 36)
    assert credentials.verify("alice", "é" * 36).id == user.id
