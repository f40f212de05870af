"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.service import PostService
from connector.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting one's own post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Delete the post.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the post's author
        """
        await self.post_service.delete_post(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
