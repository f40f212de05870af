"""Auth Gate: turns a request's bearer token into an authenticated user ID."""

from typing import Mapping

import logfire
from fastapi import Request

from connector.domain.error import UnauthenticatedError
from connector.domain.service import JWTService
from connector.domain.value import UserId
from connector.interface.error import http_error_for
from connector.util.jwt import JWTError


class AuthGate:
    """Verifies bearer tokens without touching storage.

    A missing token and a rejected one are logged differently but both
    raise the same UnauthenticatedError, so callers cannot tell them apart.
    """

    def __init__(self, jwt_service: JWTService, token_header: str) -> None:
        """Initialize the gate.

        Args:
            jwt_service: JWT token domain service
            token_header: Header carrying the token (``Authorization: Bearer``
                is accepted as a fallback)
        """
        self.jwt_service = jwt_service
        self.token_header = token_header

    def extract_token(self, headers: Mapping[str, str]) -> str | None:
        """Pull the raw token out of request headers."""
        token = headers.get(self.token_header)
        if token:
            return token.strip()

        authorization = headers.get("authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
        return None

    def authenticate(self, token: str | None) -> UserId:
        """Verify ``token`` and return the user it names.

        Raises:
            UnauthenticatedError: If the token is absent, forged or expired
        """
        if not token:
            logfire.info("Request rejected: no token")
            raise UnauthenticatedError()

        try:
            return self.jwt_service.verify(token)
        except JWTError as e:
            logfire.warn("Request rejected: bad token", reason=str(e))
            raise UnauthenticatedError() from e


def require_identity(request: Request, gate: AuthGate) -> UserId:
    """Authenticate ``request`` or answer 401.

    On success the user ID is also attached as ``request.state.user_id``.

    Raises:
        HTTPException: 401 if the request carries no valid token
    """
    try:
        user_id = gate.authenticate(gate.extract_token(request.headers))
    except UnauthenticatedError as e:
        raise http_error_for(e)

    request.state.user_id = user_id
    return user_id
