"""Delete account use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from connector.application.usecase.base import BaseUseCase
from connector.domain.repository import TransactionManager
from connector.domain.service import PostService, ProfileService, UserService
from connector.domain.value import UserId


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user_id: str  # User ID from authenticated user


class DeleteAccountResponse(BaseModel):
    """What the account deletion removed."""

    posts_deleted: int
    profile_deleted: bool


class DeleteAccountUseCase(BaseUseCase):
    """Use case for deleting an account with everything it owns.

    Runs posts, then profile, then user inside one atomic block, so a
    failure at any step undoes the earlier ones. A failure is logged with
    the step that failed and re-raised.
    """

    def __init__(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        user_service: UserService,
        transaction: TransactionManager,
    ) -> None:
        """Initialize delete account use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
            user_service: User domain service
            transaction: Groups the three deletions into one unit
        """
        self.post_service = post_service
        self.profile_service = profile_service
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: DeleteAccountRequest) -> DeleteAccountResponse:
        """Execute account deletion.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_account.execute", user_id=request.user_id):
            step = "posts"
            try:
                async with self.transaction.atomic():
                    posts_deleted = await self.post_service.delete_posts_by_author(
                        user_id
                    )

                    step = "profile"
                    profile_deleted = await self.profile_service.delete_profile(user_id)

                    step = "user"
                    await self.user_service.delete_user(user_id)
            except Exception as e:
                logfire.error(
                    "Account deletion failed",
                    user_id=request.user_id,
                    failed_step=step,
                    error=str(e),
                )
                raise

            logfire.info(
                "Account deleted",
                user_id=request.user_id,
                posts_deleted=posts_deleted,
                profile_deleted=profile_deleted,
            )
            return DeleteAccountResponse(
                posts_deleted=posts_deleted, profile_deleted=profile_deleted
            )
