"""GitHub adapter."""

from .client import GithubClient, GithubError, HttpxGithubClient, MockGithubClient

__all__ = [
    "GithubClient",
    "GithubError",
    "HttpxGithubClient",
    "MockGithubClient",
]
