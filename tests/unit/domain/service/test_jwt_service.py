"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from connector.config import AuthSettings
from connector.domain.service import JWTService
from connector.domain.value import UserId
from connector.util.jwt import InvalidTokenError, create_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestJWTService:
    """Tests for issuing and verifying tokens."""

    @pytest.mark.asyncio
    async def test_issued_token_verifies_to_same_user(self, unit_env):
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        user_id = UserId(uuid4())

        # Act
        token = jwt_service.issue(user_id)

        # Assert
        assert jwt_service.verify(token) == user_id

    @pytest.mark.asyncio
    async def test_token_for_non_uuid_subject_is_invalid(self, unit_env):
        """A correctly signed token must still name a user ID."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token("not-a-uuid", auth_settings)

        # Act & Assert
        with pytest.raises(InvalidTokenError):
            jwt_service.verify(token)
