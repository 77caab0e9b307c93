"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from budgetplanner import create_app
from budgetplanner.config import BaseConfig, DevConfig, TestConfig


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETPLANNER_DATA_DIR", str(tmp_path))
    for name in ("BUDGETPLANNER_PASSWORD_HASHER", "BUDGETPLANNER_SESSION_COOKIE", "PORT"):
        monkeypatch.delenv(name, raising=False)

    config = BaseConfig()

    assert config.SESSION_LIFETIME_SECONDS == 3600
    assert config.BCRYPT_ROUNDS == 10
    assert config.PASSWORD_HASHER == "bcrypt"
    assert config.AUTH_COOKIE_NAME == "budget_session"
    assert config.PORT == 3000
    assert config.DATA_DIR == tmp_path.resolve()


def test_secret_required_outside_dev_mode(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETPLANNER_DEV_MODE", "false")
    monkeypatch.delenv("BUDGETPLANNER_SECRET_KEY", raising=False)

    with pytest.raises(ValueError):
        BaseConfig()


def test_unknown_hasher_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETPLANNER_PASSWORD_HASHER", "md5")

    with pytest.raises(ValueError):
        BaseConfig()


def test_config_classes():
    assert DevConfig.DEBUG is True
    assert TestConfig.TESTING is True
    assert TestConfig.BCRYPT_ROUNDS == 4


def test_create_app_with_argon2(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETPLANNER_DATABASE_URL", f"sqlite:///{tmp_path / 'a.db'}")
    monkeypatch.setenv("BUDGETPLANNER_PASSWORD_HASHER", "argon2")

    app = create_app("testing")
    services = app.extensions["budgetplanner"]
    user = services.credentials.register("alice", "pw")

    assert user.password_hash.startswith("$argon2")
    assert services.credentials.verify("alice", "pw").id == user.id
    services.engine.dispose()
