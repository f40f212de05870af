"""GitHub repository lookup client.

A passthrough to the GitHub REST API listing a user's public repositories.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import logfire

from connector.adapter.error import ProviderError
from connector.config import GithubSettings


class GithubError(ProviderError):
    """GitHub lookup error."""

    pass


class GithubClient(ABC):
    """Base class for GitHub clients.

    Provides type distinction for dependency injection.
    """

    @abstractmethod
    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """List a user's public repositories.

        Raises:
            GithubError: If GitHub does not answer with 200
        """
        pass


class HttpxGithubClient(GithubClient):
    """GitHub client backed by httpx."""

    def __init__(self, settings: GithubSettings) -> None:
        """Initialize GitHub client.

        Args:
            settings: GitHub settings (API URL, credentials, listing options)
        """
        self.settings = settings

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "per_page": self.settings.per_page,
            "sort": self.settings.sort,
        }
        if self.settings.client_id and self.settings.client_secret:
            params["client_id"] = self.settings.client_id
            params["client_secret"] = self.settings.client_secret

        url = f"{self.settings.api_url}/users/{username}/repos"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={
                        "User-Agent": self.settings.user_agent,
                        "Accept": "application/vnd.github+json",
                    },
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("GitHub repository lookup HTTP error", error=str(e))
            raise GithubError(f"HTTP error during GitHub lookup: {e}")

        if response.status_code != 200:
            logfire.warn(
                "GitHub repository lookup failed",
                username=username,
                status_code=response.status_code,
            )
            raise GithubError(f"No Github profile found for {username}")

        repositories = response.json()
        logfire.info(
            "GitHub repositories fetched", username=username, count=len(repositories)
        )
        return repositories


class MockGithubClient(GithubClient):
    """Canned GitHub client for tests.

    Knows ``octocat`` out of the box; any other username behaves like a
    GitHub 404 unless added to ``repositories``.
    """

    def __init__(self, repositories: dict[str, list[dict[str, Any]]] | None = None):
        self.repositories = (
            repositories
            if repositories is not None
            else {
                "octocat": [
                    {
                        "id": 1,
                        "name": "hello-world",
                        "html_url": "https://github.com/octocat/hello-world",
                        "description": "My first repository",
                        "stargazers_count": 42,
                        "watchers_count": 42,
                        "forks_count": 7,
                    },
                    {
                        "id": 2,
                        "name": "spoon-knife",
                        "html_url": "https://github.com/octocat/spoon-knife",
                        "description": "Forking practice",
                        "stargazers_count": 12,
                        "watchers_count": 12,
                        "forks_count": 30,
                    },
                ]
            }
        )

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        if username not in self.repositories:
            raise GithubError(f"No Github profile found for {username}")
        return list(self.repositories[username])
