"""Small test doubles and client helpers shared across test modules."""

from __future__ import annotations

from datetime import datetime


class FakeClock:
    """Callable clock that tests move forward by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeHasher:
    """Reversible stand-in that satisfies the PasswordHasher protocol."""

    def hash(self, plain: str) -> str:
        return f"fake${plain[::-1]}"

    def verify(self, plain: str, stored: str) -> bool:
        return stored == self.hash(plain)


def register(client, username: str = "alice", password: str = "s3cret!"):
    return client.post("/register", data={"username": username, "password": password})


def login(client, username: str = "alice", password: str = "s3cret!"):
    return client.post("/login", data={"username": username, "password": password})


def auth_cookie_header(response) -> str:
    """Return the Set-Cookie header carrying the auth token."""

    for header in response.headers.getlist("Set-Cookie"):
        if header.startswith("budget_session="):
            return header
    raise AssertionError("auth cookie not set")
