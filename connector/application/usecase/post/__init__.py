"""Post use cases."""

from .comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentsResponse,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from .count_own_posts import (
    CountOwnPostsRequest,
    CountOwnPostsResponse,
    CountOwnPostsUseCase,
)
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .like_post import LikePostRequest, LikePostUseCase, LikesResponse, UnlikePostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .views import CommentView, LikeView, PostView

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentView",
    "CommentsResponse",
    "CountOwnPostsRequest",
    "CountOwnPostsResponse",
    "CountOwnPostsUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostUseCase",
    "LikeView",
    "LikesResponse",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostView",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
    "UnlikePostUseCase",
]
