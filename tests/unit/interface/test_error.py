"""Unit tests for mapping errors onto HTTP responses."""

import pytest

from connector.adapter.github import GithubError
from connector.domain.error import (
    AlreadyLikedError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    NotYetLikedError,
    UnauthenticatedError,
)
from connector.interface.error import http_error_for, server_error


@pytest.mark.parametrize(
    ("error", "status_code", "detail"),
    [
        (NotFoundError("Post", "x"), 404, "Post not found: x"),
        (UnauthenticatedError(), 401, "Not authenticated"),
        (NotAuthorizedError("post", "x", "u"), 401, "User not authorized"),
        (InvalidCredentialsError(), 400, "Invalid credentials"),
        (AlreadyLikedError("x"), 400, "Post already liked"),
        (NotYetLikedError("x"), 400, "Post has not yet been liked"),
        (EmailAlreadyRegisteredError("a@b.io"), 400, "User already exists"),
        (GithubError("boom"), 400, "No Github profile found"),
    ],
)
def test_http_error_for(error, status_code, detail):
    http_error = http_error_for(error)

    assert http_error.status_code == status_code
    assert http_error.detail == detail


def test_unauthenticated_carries_challenge_header():
    http_error = http_error_for(UnauthenticatedError())

    assert http_error.headers == {"WWW-Authenticate": "Bearer"}


def test_unmapped_error_is_a_programming_error():
    with pytest.raises(TypeError):
        http_error_for(KeyError("nope"))


def test_server_error_is_opaque():
    http_error = server_error()

    assert http_error.status_code == 500
    assert http_error.detail == "Server Error"
