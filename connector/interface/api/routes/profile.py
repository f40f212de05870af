"""Profile routes."""

from datetime import date
from typing import Any
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field, field_validator

from connector.adapter.github import GithubError
from connector.application.usecase.profile import (
    AddEducationRequest,
    AddEducationUseCase,
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetGithubReposRequest,
    GetGithubReposUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ListProfilesRequest,
    ListProfilesUseCase,
    ProfileView,
    RemoveEducationRequest,
    RemoveEducationUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from connector.domain.error import DomainError
from connector.domain.value import split_skills
from connector.interface.api.gate import AuthGate, require_identity
from connector.interface.api.routes.common import MessageResponse
from connector.interface.error import http_error_for, server_error

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpsertProfileAPIRequest(BaseModel):
    """API request for creating or updating the caller's profile.

    ``skills`` may be a comma separated string or a list.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(min_length=1)
    skills: str | list[str]
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = Field(default=None, alias="githubusername")
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("skills")
    @classmethod
    def skills_not_empty(cls, v: str | list[str]) -> str | list[str]:
        if not split_skills(v):
            raise ValueError("Skills is required")
        return v


class ExperienceAPIRequest(BaseModel):
    """API request for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class EducationAPIRequest(BaseModel):
    """API request for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field_of_study: str = Field(min_length=1, alias="fieldofstudy")
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


@router.get("/me", response_model=ProfileView)
async def get_my_profile(
    request: Request,
    gate: FromDishka[AuthGate],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileView:
    """Get the caller's own profile.

    Raises:
        HTTPException: 404 if the caller has not created one
    """
    user_id = require_identity(request, gate)

    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error loading own profile", error=str(e))
        raise server_error()


@router.post("", response_model=ProfileView)
async def upsert_profile(
    body: UpsertProfileAPIRequest,
    request: Request,
    gate: FromDishka[AuthGate],
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
) -> ProfileView:
    """Create the caller's profile, or update the fields supplied."""
    user_id = require_identity(request, gate)

    try:
        return await upsert_profile_use_case.execute(
            UpsertProfileRequest(user_id=str(user_id), **body.model_dump())
        )
    except DomainError as e:
        logfire.warn("Profile update rejected", user_id=str(user_id), error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error saving profile", error=str(e))
        raise server_error()


@router.get("", response_model=list[ProfileView])
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> list[ProfileView]:
    """List every profile. Public."""
    try:
        result = await list_profiles_use_case.execute(ListProfilesRequest())
    except Exception as e:
        logfire.error("Unexpected error listing profiles", error=str(e))
        raise server_error()
    return result.profiles


@router.get("/user/{user_id}", response_model=ProfileView)
async def get_profile_by_user(
    user_id: UUID,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileView:
    """Get a user's profile. Public.

    Raises:
        HTTPException: 404 if the user has no profile
    """
    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error loading profile", user_id=str(user_id), error=str(e))
        raise server_error()


@router.delete("", response_model=MessageResponse)
async def delete_account(
    request: Request,
    gate: FromDishka[AuthGate],
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> MessageResponse:
    """Delete the caller's posts, profile and account."""
    user_id = require_identity(request, gate)

    try:
        await delete_account_use_case.execute(DeleteAccountRequest(user_id=str(user_id)))
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error deleting account", user_id=str(user_id), error=str(e))
        raise server_error()

    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileView)
async def add_experience(
    body: ExperienceAPIRequest,
    request: Request,
    gate: FromDishka[AuthGate],
    add_experience_use_case: FromDishka[AddExperienceUseCase],
) -> ProfileView:
    """Add an experience entry to the front of the caller's profile."""
    user_id = require_identity(request, gate)

    try:
        return await add_experience_use_case.execute(
            AddExperienceRequest(user_id=str(user_id), **body.model_dump())
        )
    except (DomainError, ValueError) as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error adding experience", error=str(e))
        raise server_error()


@router.delete("/experience/{experience_id}", response_model=ProfileView)
async def remove_experience(
    experience_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    remove_experience_use_case: FromDishka[RemoveExperienceUseCase],
) -> ProfileView:
    """Remove an experience entry from the caller's profile."""
    user_id = require_identity(request, gate)

    try:
        return await remove_experience_use_case.execute(
            RemoveExperienceRequest(user_id=str(user_id), experience_id=str(experience_id))
        )
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error removing experience", error=str(e))
        raise server_error()


@router.put("/education", response_model=ProfileView)
async def add_education(
    body: EducationAPIRequest,
    request: Request,
    gate: FromDishka[AuthGate],
    add_education_use_case: FromDishka[AddEducationUseCase],
) -> ProfileView:
    """Add an education entry to the front of the caller's profile."""
    user_id = require_identity(request, gate)

    try:
        return await add_education_use_case.execute(
            AddEducationRequest(user_id=str(user_id), **body.model_dump())
        )
    except (DomainError, ValueError) as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error adding education", error=str(e))
        raise server_error()


@router.delete("/education/{education_id}", response_model=ProfileView)
async def remove_education(
    education_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    remove_education_use_case: FromDishka[RemoveEducationUseCase],
) -> ProfileView:
    """Remove an education entry from the caller's profile."""
    user_id = require_identity(request, gate)

    try:
        return await remove_education_use_case.execute(
            RemoveEducationRequest(user_id=str(user_id), education_id=str(education_id))
        )
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error removing education", error=str(e))
        raise server_error()


@router.get("/github/{username}", response_model=list[dict[str, Any]])
async def get_github_repos(
    username: str,
    get_github_repos_use_case: FromDishka[GetGithubReposUseCase],
) -> list[dict[str, Any]]:
    """List a GitHub user's most recent public repositories. Public.

    Raises:
        HTTPException: 400 if GitHub has no such user
    """
    try:
        result = await get_github_repos_use_case.execute(
            GetGithubReposRequest(username=username)
        )
    except GithubError as e:
        logfire.warn("GitHub lookup failed", username=username, error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error querying GitHub", username=username, error=str(e))
        raise server_error()

    return result.repositories
