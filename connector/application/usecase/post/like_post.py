"""Like and unlike post use cases."""

from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService
from connector.domain.value import PostId, UserId

from .views import LikeView


class LikePostRequest(BaseModel):
    """Like or unlike request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class LikesResponse(BaseModel):
    """The post's likes after the change, most recent first."""

    likes: list[LikeView]


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikesResponse:
        """Like the post.

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If the user already likes the post
        """
        post = await self.post_service.like_post(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
        return LikesResponse(likes=[LikeView.from_domain(like) for like in post.likes])


class UnlikePostUseCase(BaseUseCase):
    """Use case for withdrawing a like."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikesResponse:
        """Unlike the post.

        Raises:
            NotFoundError: If post not found
            NotYetLikedError: If the user has not liked the post
        """
        post = await self.post_service.unlike_post(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
        return LikesResponse(likes=[LikeView.from_domain(like) for like in post.likes])
