"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService
from connector.domain.value import PostId

from .views import PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Fetch a post.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return PostView.from_domain(post)
