"""Repository interfaces."""

from connector.domain.repository.post import PostRepository
from connector.domain.repository.profile import ProfileRepository
from connector.domain.repository.transaction import TransactionManager
from connector.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "ProfileRepository",
    "TransactionManager",
    "UserRepository",
]
