"""Response models shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel

from connector.domain.model import Comment, Like, Post


class LikeView(BaseModel):
    """A like on a post."""

    user_id: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeView":
        return cls(user_id=str(like.user_id))


class CommentView(BaseModel):
    """A comment on a post."""

    id: str
    user_id: str
    name: str
    avatar: str | None
    text: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            user_id=str(comment.author_id),
            name=comment.name,
            avatar=comment.avatar,
            text=comment.text,
            created_at=comment.created_at,
        )


class PostView(BaseModel):
    """A post with its likes and comments."""

    id: str
    user_id: str
    name: str
    avatar: str | None
    text: str
    likes: list[LikeView]
    comments: list[CommentView]
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            user_id=str(post.author_id),
            name=post.name,
            avatar=post.avatar,
            text=post.text,
            likes=[LikeView.from_domain(like) for like in post.likes],
            comments=[CommentView.from_domain(c) for c in post.comments],
            created_at=post.created_at,
        )
