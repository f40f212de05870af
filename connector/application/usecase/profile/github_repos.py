"""GitHub repositories use case."""

from typing import Any

from pydantic import BaseModel

from connector.adapter.github import GithubClient
from connector.application.usecase.base import BaseUseCase


class GetGithubReposRequest(BaseModel):
    """GitHub repositories request."""

    username: str


class GetGithubReposResponse(BaseModel):
    """Repositories as returned by GitHub."""

    repositories: list[dict[str, Any]]


class GetGithubReposUseCase(BaseUseCase):
    """Use case for listing a GitHub user's latest public repositories."""

    def __init__(self, github_client: GithubClient) -> None:
        self.github_client = github_client

    async def execute(self, request: GetGithubReposRequest) -> GetGithubReposResponse:
        """Fetch the repositories.

        Raises:
            GithubError: If GitHub does not know the user or fails
        """
        repositories = await self.github_client.list_repositories(request.username)
        return GetGithubReposResponse(repositories=repositories)
