"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from connector.application.usecase.post import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentView,
    CountOwnPostsRequest,
    CountOwnPostsResponse,
    CountOwnPostsUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    LikeView,
    ListPostsRequest,
    ListPostsUseCase,
    PostView,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    UnlikePostUseCase,
)
from connector.domain.error import DomainError
from connector.interface.api.gate import AuthGate, require_identity
from connector.interface.api.routes.common import MessageResponse
from connector.interface.error import http_error_for, server_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostTextAPIRequest(BaseModel):
    """API request body for a post or a comment."""

    text: str = Field(min_length=1, max_length=10000)


@router.post("", response_model=PostView)
async def create_post(
    body: PostTextAPIRequest,
    request: Request,
    gate: FromDishka[AuthGate],
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostView:
    """Create a post authored by the caller.

    The author's name and avatar are copied onto the post.
    """
    user_id = require_identity(request, gate)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(author_id=str(user_id), text=body.text)
        )
    except DomainError as e:
        logfire.warn("Post creation rejected", user_id=str(user_id), error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise server_error()


@router.get("", response_model=list[PostView])
async def list_posts(
    request: Request,
    gate: FromDishka[AuthGate],
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List every post, newest first."""
    require_identity(request, gate)

    try:
        result = await list_posts_use_case.execute(ListPostsRequest())
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise server_error()
    return result.posts


@router.get("/count", response_model=CountOwnPostsResponse)
async def count_own_posts(
    request: Request,
    gate: FromDishka[AuthGate],
    count_own_posts_use_case: FromDishka[CountOwnPostsUseCase],
) -> CountOwnPostsResponse:
    """Count the posts the caller has written."""
    user_id = require_identity(request, gate)

    try:
        return await count_own_posts_use_case.execute(
            CountOwnPostsRequest(user_id=str(user_id))
        )
    except Exception as e:
        logfire.error("Unexpected error counting posts", error=str(e))
        raise server_error()


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a single post.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    require_identity(request, gate)

    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error loading post", post_id=str(post_id), error=str(e))
        raise server_error()


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> MessageResponse:
    """Delete a post. Only its author may do so.

    Raises:
        HTTPException: 404 if the post does not exist, 401 if not the author
    """
    user_id = require_identity(request, gate)

    try:
        await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=str(user_id))
        )
    except DomainError as e:
        logfire.warn("Post deletion rejected", post_id=str(post_id), error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=str(post_id), error=str(e))
        raise server_error()

    return MessageResponse(msg="Post removed")


@router.put("/like/{post_id}", response_model=list[LikeView])
async def like_post(
    post_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    like_post_use_case: FromDishka[LikePostUseCase],
) -> list[LikeView]:
    """Like a post and return its likes, newest first.

    Raises:
        HTTPException: 400 if the caller already likes it
    """
    user_id = require_identity(request, gate)

    try:
        result = await like_post_use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=str(user_id))
        )
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error liking post", post_id=str(post_id), error=str(e))
        raise server_error()

    return result.likes


@router.put("/unlike/{post_id}", response_model=list[LikeView])
async def unlike_post(
    post_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
) -> list[LikeView]:
    """Withdraw the caller's like and return the remaining likes.

    Raises:
        HTTPException: 400 if the caller has not liked it
    """
    user_id = require_identity(request, gate)

    try:
        result = await unlike_post_use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=str(user_id))
        )
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error unliking post", post_id=str(post_id), error=str(e))
        raise server_error()

    return result.likes


@router.post("/comment/{post_id}", response_model=list[CommentView])
async def add_comment(
    post_id: UUID,
    body: PostTextAPIRequest,
    request: Request,
    gate: FromDishka[AuthGate],
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> list[CommentView]:
    """Comment on a post and return its comments, newest first."""
    user_id = require_identity(request, gate)

    try:
        result = await add_comment_use_case.execute(
            AddCommentRequest(post_id=str(post_id), author_id=str(user_id), text=body.text)
        )
    except DomainError as e:
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error adding comment", post_id=str(post_id), error=str(e))
        raise server_error()

    return result.comments


@router.delete("/{post_id}/{comment_id}", response_model=list[CommentView])
async def remove_comment(
    post_id: UUID,
    comment_id: UUID,
    request: Request,
    gate: FromDishka[AuthGate],
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
) -> list[CommentView]:
    """Remove one of the caller's comments and return the remaining ones.

    Raises:
        HTTPException: 404 if the post or comment is missing, 401 if the
            caller did not write the comment
    """
    user_id = require_identity(request, gate)

    try:
        result = await remove_comment_use_case.execute(
            RemoveCommentRequest(
                post_id=str(post_id), comment_id=str(comment_id), user_id=str(user_id)
            )
        )
    except DomainError as e:
        logfire.warn("Comment removal rejected", comment_id=str(comment_id), error=str(e))
        raise http_error_for(e)
    except Exception as e:
        logfire.error("Unexpected error removing comment", comment_id=str(comment_id), error=str(e))
        raise server_error()

    return result.comments
