"""Profile use cases."""

from .delete_account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)
from .education import (
    AddEducationRequest,
    AddEducationUseCase,
    RemoveEducationRequest,
    RemoveEducationUseCase,
)
from .experience import (
    AddExperienceRequest,
    AddExperienceUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
)
from .get_profile import GetProfileRequest, GetProfileUseCase
from .github_repos import (
    GetGithubReposRequest,
    GetGithubReposResponse,
    GetGithubReposUseCase,
)
from .list_profiles import ListProfilesRequest, ListProfilesResponse, ListProfilesUseCase
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase
from .views import EducationView, ExperienceView, ProfileView

__all__ = [
    "AddEducationRequest",
    "AddEducationUseCase",
    "AddExperienceRequest",
    "AddExperienceUseCase",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
    "EducationView",
    "ExperienceView",
    "GetGithubReposRequest",
    "GetGithubReposResponse",
    "GetGithubReposUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileView",
    "RemoveEducationRequest",
    "RemoveEducationUseCase",
    "RemoveExperienceRequest",
    "RemoveExperienceUseCase",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
]
