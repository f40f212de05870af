"""Strongly typed identifiers for Connector domain entities.

Using NewType keeps user, post and profile ids from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ProfileId = NewType("ProfileId", UUID)
ExperienceId = NewType("ExperienceId", UUID)
EducationId = NewType("EducationId", UUID)
