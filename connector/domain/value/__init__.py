"""Domain value objects for Connector."""

from connector.domain.value.identifiers import (
    CommentId,
    EducationId,
    ExperienceId,
    PostId,
    ProfileId,
    UserId,
)
from connector.domain.value.types import Email, split_skills

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ProfileId",
    "ExperienceId",
    "EducationId",
    # Types
    "Email",
    "split_skills",
]
