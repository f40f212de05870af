"""User aggregate root.

A user is an account identity: it logs in with email and password and
owns at most one profile plus any number of posts.
"""

from datetime import datetime

from pydantic import Field

from connector.domain.model.common import DomainModel, utcnow
from connector.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Email
    avatar: str | None = None
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)
