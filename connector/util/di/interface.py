"""Interface layer DI providers."""

from dishka import Scope, provide

from connector.config import AuthSettings
from connector.domain.service import JWTService
from connector.interface.api.gate import AuthGate
from connector.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Provides the auth gate guarding protected routes."""

    @provide(scope=Scope.REQUEST)
    def get_auth_gate(
        self, jwt_service: JWTService, auth_settings: AuthSettings
    ) -> AuthGate:
        return AuthGate(jwt_service=jwt_service, token_header=auth_settings.token_header)
