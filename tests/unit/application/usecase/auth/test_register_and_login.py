"""Unit tests for registration, login and current-user use cases."""

import pytest

from connector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from connector.domain.error import InvalidCredentialsError
from connector.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        current_user = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await register.execute(
            RegisterRequest(name="Ada", email="ada@example.com", password="secret123")
        )

        # Assert
        user_id = jwt_service.verify(response.token)
        me = await current_user.execute(GetCurrentUserRequest(user_id=str(user_id)))
        assert me.name == "Ada"
        assert me.email == "ada@example.com"
        assert not hasattr(me, "password_hash")


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_same_user(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        registered = await register.execute(
            RegisterRequest(name="Ada", email="ada@example.com", password="secret123")
        )

        # Act
        response = await login.execute(
            LoginRequest(email="ADA@example.com", password="secret123")
        )

        # Assert
        assert jwt_service.verify(response.token) == jwt_service.verify(
            registered.token
        )

    @pytest.mark.asyncio
    async def test_login_with_wrong_password_fails(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(
            RegisterRequest(name="Ada", email="ada@example.com", password="secret123")
        )

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="ada@example.com", password="nope"))
