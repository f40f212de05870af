"""Post aggregate root.

A post is loaded whole, changed in memory and saved back as one unit,
likes and comments included.
"""

from datetime import datetime

from pydantic import Field

from connector.domain.model.common import DomainModel, utcnow
from connector.domain.value import CommentId, PostId, UserId


class Like(DomainModel):
    """One user's like on a post."""

    user_id: UserId


class Comment(DomainModel):
    """Comment nested in a post.

    Name and avatar are snapshots of the author taken when commenting.
    """

    id: CommentId
    author_id: UserId
    name: str
    avatar: str | None = None
    text: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utcnow)


class Post(DomainModel):
    """Post aggregate root.

    Likes and comments are kept most-recent-first. A user appears at most
    once in ``likes``.
    """

    id: PostId
    author_id: UserId
    name: str
    avatar: str | None = None
    text: str = Field(min_length=1)
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    def is_liked_by(self, user_id: UserId) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)
