"""Test configuration and fixtures."""

import os
from uuid import uuid4

# Settings are read from the environment; keep tests fast and offline
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402

from connector.domain.model import User  # noqa: E402
from connector.domain.value import Email, UserId  # noqa: E402
from connector.util.password import hash_password  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


def make_user(
    name: str = "Ada Lovelace",
    email: str | None = None,
    password: str = "secret123",
) -> User:
    """Helper to build a user with a real (cheap) bcrypt hash.

    Args:
        name: Display name
        email: Email address, random when omitted
        password: Plain-text password to hash

    Returns:
        User not yet saved anywhere
    """
    address = Email(email or f"user-{uuid4().hex[:8]}@example.com")
    return User(
        id=UserId(uuid4()),
        name=name,
        email=address,
        avatar=address.gravatar_url(),
        password_hash=hash_password(password, rounds=4),
    )
