"""Unit tests for GitHub clients and the repository lookup use case."""

import pytest

from connector.adapter.github import GithubClient, GithubError, MockGithubClient
from connector.application.usecase.profile import (
    GetGithubReposRequest,
    GetGithubReposUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestMockGithubClient:
    """Tests for the canned client."""

    @pytest.mark.asyncio
    async def test_knows_octocat(self):
        client = MockGithubClient()

        repos = await client.list_repositories("octocat")

        assert [r["name"] for r in repos] == ["hello-world", "spoon-knife"]

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self):
        client = MockGithubClient(repositories={})

        with pytest.raises(GithubError):
            await client.list_repositories("octocat")


class TestGetGithubReposUseCase:
    """Tests for GetGithubReposUseCase wired through the container."""

    @pytest.mark.asyncio
    async def test_container_provides_mock_client(self, unit_env):
        client = await unit_env.get(GithubClient)

        assert isinstance(client, MockGithubClient)

    @pytest.mark.asyncio
    async def test_returns_repositories_verbatim(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetGithubReposUseCase)

        # Act
        response = await use_case.execute(GetGithubReposRequest(username="octocat"))

        # Assert
        assert response.repositories[0]["html_url"] == (
            "https://github.com/octocat/hello-world"
        )

    @pytest.mark.asyncio
    async def test_unknown_user_propagates_error(self, unit_env):
        use_case = await unit_env.get(GetGithubReposUseCase)

        with pytest.raises(GithubError):
            await use_case.execute(GetGithubReposRequest(username="no-such-user"))
