"""Add and remove comment use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService, UserService
from connector.domain.value import CommentId, PostId, UserId

from .views import CommentView


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    author_id: str  # User ID from authenticated user
    text: str


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class CommentsResponse(BaseModel):
    """The post's comments after the change, most recent first."""

    comments: list[CommentView]


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentsResponse:
        """Add the comment.

        Raises:
            NotFoundError: If the author or the post is not found
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        with logfire.span("add_comment.execute", post_id=request.post_id):
            post = await self.post_service.add_comment(
                author, PostId(UUID(request.post_id)), request.text
            )
            return CommentsResponse(
                comments=[CommentView.from_domain(c) for c in post.comments]
            )


class RemoveCommentUseCase(BaseUseCase):
    """Use case for deleting one's own comment."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RemoveCommentRequest) -> CommentsResponse:
        """Remove the comment.

        Raises:
            NotFoundError: If the post or the comment is not found
            NotAuthorizedError: If the user did not write the comment
        """
        post = await self.post_service.remove_comment(
            UserId(UUID(request.user_id)),
            PostId(UUID(request.post_id)),
            CommentId(UUID(request.comment_id)),
        )
        return CommentsResponse(
            comments=[CommentView.from_domain(c) for c in post.comments]
        )
