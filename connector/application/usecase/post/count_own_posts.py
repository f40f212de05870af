"""Count own posts use case."""

from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService
from connector.domain.value import UserId


class CountOwnPostsRequest(BaseModel):
    """Count own posts request."""

    user_id: str


class CountOwnPostsResponse(BaseModel):
    """Number of posts the user has written."""

    count: int


class CountOwnPostsUseCase(BaseUseCase):
    """Use case for counting the caller's own posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: CountOwnPostsRequest) -> CountOwnPostsResponse:
        count = await self.post_service.count_posts_by_author(
            UserId(UUID(request.user_id))
        )
        return CountOwnPostsResponse(count=count)
