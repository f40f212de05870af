"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService, UserService
from connector.domain.value import UserId

from .views import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    text: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Load the author (name and avatar are copied onto the post)
        2. Create and save the post

        Raises:
            NotFoundError: If the author no longer exists
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(author, request.text)
            return PostView.from_domain(post)
