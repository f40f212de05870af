"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .ownership import OwnedResource, OwnershipPolicy
from .post_service import PostService
from .profile_service import ProfileService
from .user_service import UserService

__all__ = [
    "JWTService",
    "OwnedResource",
    "OwnershipPolicy",
    "PostService",
    "ProfileService",
    "Service",
    "UserService",
]
