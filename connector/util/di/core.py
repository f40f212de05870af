"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from connector.config import AuthSettings, GithubSettings, Settings
from connector.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_github_settings(self, settings: Settings) -> GithubSettings:
        return settings.github
