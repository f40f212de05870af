"""Authentication routes."""

import logging

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from connector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    TokenResponse,
)
from connector.domain.error import DomainError
from connector.domain.value import Email
from connector.interface.api.gate import AuthGate, require_identity
from connector.interface.error import http_error_for, server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)
users_router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: Email
    password: str = Field(min_length=1)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    name: str = Field(min_length=1, max_length=255)
    email: Email
    password: str = Field(min_length=6)


@router.get("", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    gate: FromDishka[AuthGate],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Return the authenticated user, without the password hash.

    Raises:
        HTTPException: 401 without a valid token, 404 if the account is gone
    """
    user_id = require_identity(request, gate)

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=str(user_id))
        )
    except DomainError as e:
        logfire.warn("Current user lookup failed", user_id=str(user_id), error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error loading current user", error=str(e))
        raise server_error()


@router.post("", response_model=TokenResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse:
    """Exchange email and password for a bearer token.

    Raises:
        HTTPException: 400 if the credentials do not match
    """
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email.root, password=request.password)
        )
    except DomainError as e:
        logger.info("Login rejected: %s", e)
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error during login", error=str(e))
        raise server_error()


@users_router.post("", response_model=TokenResponse)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> TokenResponse:
    """Create an account and return a bearer token for it.

    Raises:
        HTTPException: 400 if the email is already registered
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                name=request.name,
                email=request.email.root,
                password=request.password,
            )
        )
    except DomainError as e:
        logger.info("Registration rejected: %s", e)
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error during registration", error=str(e))
        raise server_error()
