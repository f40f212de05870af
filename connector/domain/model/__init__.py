"""Domain models."""

from connector.domain.model.common import DomainModel
from connector.domain.model.post import Comment, Like, Post
from connector.domain.model.profile import (
    Education,
    Experience,
    Profile,
    ProfileDetails,
    SocialLinks,
)
from connector.domain.model.user import User

__all__ = [
    "Comment",
    "DomainModel",
    "Education",
    "Experience",
    "Like",
    "Post",
    "Profile",
    "ProfileDetails",
    "SocialLinks",
    "User",
]
