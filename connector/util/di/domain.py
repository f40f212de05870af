"""Domain layer DI providers."""

from dishka import Scope, provide

from connector.config import AuthSettings
from connector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from connector.domain.service import (
    JWTService,
    OwnershipPolicy,
    PostService,
    ProfileService,
    UserService,
)
from connector.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_ownership_policy(self) -> OwnershipPolicy:
        """Provide ownership policy."""
        return OwnershipPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, ownership_policy: OwnershipPolicy
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, ownership_policy=ownership_policy
        )

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        ownership_policy: OwnershipPolicy,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository, ownership_policy=ownership_policy
        )
