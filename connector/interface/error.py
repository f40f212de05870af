"""Mapping of domain and adapter errors onto HTTP responses.

Every error body is ``{"success": false, "msg": ...}`` except request
field validation, which answers 400 with ``{"errors": [...]}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from connector.adapter.github import GithubError
from connector.adapter.error import ProviderError
from connector.domain.error import (
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

SERVER_ERROR_MESSAGE = "Server Error"


def http_error_for(error: Exception) -> HTTPException:
    """Translate a domain or adapter error into an HTTPException.

    Raises:
        TypeError: If the error has no HTTP mapping (a programming error)
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, UnauthenticatedError):
        return HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail="User not authorized")
    if isinstance(error, InvalidCredentialsError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, (ConflictError, ValidationError)):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, GithubError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail="No Github profile found")
    if isinstance(error, ProviderError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, (DomainError, ValueError)):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    raise TypeError(f"No HTTP mapping for {type(error).__name__}")


def server_error() -> HTTPException:
    """Opaque 500 for unexpected failures. Details stay in the logs."""
    return HTTPException(
        status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SERVER_ERROR_MESSAGE
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()

    # A malformed id in the path cannot name an existing resource
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "msg": "Resource not found"},
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "errors": [
                {
                    "param": ".".join(str(part) for part in err["loc"][1:]),
                    "msg": err["msg"],
                    "location": str(err["loc"][0]),
                }
                for err in errors
            ]
        },
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "msg": SERVER_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error shapes on ``app``."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
