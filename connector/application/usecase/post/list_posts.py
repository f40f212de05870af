"""List posts use case."""

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService

from .views import PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    pass


class ListPostsResponse(BaseModel):
    """List posts response, newest first."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing all posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=[PostView.from_domain(p) for p in posts])
