"""Application layer DI providers."""

from dishka import Scope, provide

from connector.adapter.github import GithubClient
from connector.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from connector.application.usecase.post import (
    AddCommentUseCase,
    CountOwnPostsUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    RemoveCommentUseCase,
    UnlikePostUseCase,
)
from connector.application.usecase.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetGithubReposUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    RemoveEducationUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from connector.domain.repository import TransactionManager
from connector.domain.service import (
    JWTService,
    PostService,
    ProfileService,
    UserService,
)
from connector.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_count_own_posts_use_case(
        self, post_service: PostService
    ) -> CountOwnPostsUseCase:
        return CountOwnPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(post_service=post_service)

    @provide
    def get_unlike_post_use_case(self, post_service: PostService) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(post_service=post_service)

    @provide
    def get_add_comment_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_remove_comment_use_case(
        self, post_service: PostService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(post_service=post_service)

    # Profile use cases
    @provide
    def get_get_profile_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_list_profiles_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_upsert_profile_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> UpsertProfileUseCase:
        """Provide upsert profile use case."""
        return UpsertProfileUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_add_experience_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> AddExperienceUseCase:
        return AddExperienceUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_remove_experience_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> RemoveExperienceUseCase:
        return RemoveExperienceUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_add_education_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> AddEducationUseCase:
        return AddEducationUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_remove_education_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> RemoveEducationUseCase:
        return RemoveEducationUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_delete_account_use_case(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        user_service: UserService,
        transaction: TransactionManager,
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(
            post_service=post_service,
            profile_service=profile_service,
            user_service=user_service,
            transaction=transaction,
        )

    @provide
    def get_github_repos_use_case(
        self, github_client: GithubClient
    ) -> GetGithubReposUseCase:
        """Provide GitHub repository lookup use case."""
        return GetGithubReposUseCase(github_client=github_client)
