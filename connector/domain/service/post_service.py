"""Post domain service."""

from uuid import uuid4

import logfire

from connector.domain.error import AlreadyLikedError, NotFoundError, NotYetLikedError
from connector.domain.model import Comment, Like, Post, User
from connector.domain.repository import PostRepository
from connector.domain.value import CommentId, PostId, UserId

from .base import Service
from .ownership import OwnershipPolicy


class PostService(Service):
    """Domain service for posts, their likes and their comments.

    Every change loads the whole post, edits it in memory and saves it
    back. Mutating loads lock the post for the rest of the transaction.
    """

    def __init__(
        self, post_repository: PostRepository, ownership_policy: OwnershipPolicy
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            ownership_policy: Ownership rules for posts and comments
        """
        self.post_repository = post_repository
        self.ownership_policy = ownership_policy

    async def create_post(self, author: User, text: str) -> Post:
        """Create a post, snapshotting the author's name and avatar."""
        with logfire.span("post_service.create_post", author_id=str(author.id)):
            post = Post(
                id=PostId(uuid4()),
                author_id=author.id,
                name=author.name,
                avatar=author.avatar,
                text=text,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId, for_update: bool = False) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_repository.find_by_id(post_id, for_update=for_update)
        if not post:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        return await self.post_repository.find_all()

    async def count_posts_by_author(self, author_id: UserId) -> int:
        """Count the posts a user has written."""
        return await self.post_repository.count_by_author(author_id)

    async def delete_post(self, user_id: UserId, post_id: PostId) -> None:
        """Delete a post owned by ``user_id``.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the post's author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id, for_update=True)
            self.ownership_policy.ensure_may_mutate(user_id, post)

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def like_post(self, user_id: UserId, post_id: PostId) -> Post:
        """Add ``user_id`` to the front of the post's likes.

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If the user already likes the post
        """
        with logfire.span(
            "post_service.like_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id, for_update=True)
            if post.is_liked_by(user_id):
                logfire.warn(
                    "Duplicate like attempt", post_id=str(post_id), user_id=str(user_id)
                )
                raise AlreadyLikedError(str(post_id))

            updated = post.model_copy(
                update={"likes": [Like(user_id=user_id), *post.likes]}
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post liked", post_id=str(post_id), likes=len(saved.likes))
            return saved

    async def unlike_post(self, user_id: UserId, post_id: PostId) -> Post:
        """Remove ``user_id``'s like from the post.

        Raises:
            NotFoundError: If post not found
            NotYetLikedError: If the user has not liked the post
        """
        with logfire.span(
            "post_service.unlike_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id, for_update=True)
            if not post.is_liked_by(user_id):
                logfire.warn(
                    "Unlike without like", post_id=str(post_id), user_id=str(user_id)
                )
                raise NotYetLikedError(str(post_id))

            updated = post.model_copy(
                update={
                    "likes": [like for like in post.likes if like.user_id != user_id]
                }
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post unliked", post_id=str(post_id), likes=len(saved.likes))
            return saved

    async def add_comment(self, author: User, post_id: PostId, text: str) -> Post:
        """Add a comment to the front of the post's comments.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "post_service.add_comment", post_id=str(post_id), author_id=str(author.id)
        ):
            post = await self.get_post(post_id, for_update=True)

            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author.id,
                name=author.name,
                avatar=author.avatar,
                text=text,
            )
            updated = post.model_copy(update={"comments": [comment, *post.comments]})
            saved = await self.post_repository.save(updated)
            logfire.info(
                "Comment added", post_id=str(post_id), comment_id=str(comment.id)
            )
            return saved

    async def remove_comment(
        self, user_id: UserId, post_id: PostId, comment_id: CommentId
    ) -> Post:
        """Remove a comment written by ``user_id``.

        Raises:
            NotFoundError: If the post or the comment is not found
            NotAuthorizedError: If the user did not write the comment
        """
        with logfire.span(
            "post_service.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            post = await self.get_post(post_id, for_update=True)

            comment = post.find_comment(comment_id)
            if not comment:
                logfire.warn(
                    "Comment not found", post_id=str(post_id), comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            self.ownership_policy.ensure_may_mutate(user_id, comment)

            updated = post.model_copy(
                update={"comments": [c for c in post.comments if c.id != comment_id]}
            )
            saved = await self.post_repository.save(updated)
            logfire.info(
                "Comment removed", post_id=str(post_id), comment_id=str(comment_id)
            )
            return saved

    async def delete_posts_by_author(self, author_id: UserId) -> int:
        """Delete every post a user has written. Returns the number deleted."""
        with logfire.span(
            "post_service.delete_posts_by_author", author_id=str(author_id)
        ):
            deleted = await self.post_repository.delete_by_author(author_id)
            logfire.info("Posts deleted", author_id=str(author_id), count=deleted)
            return deleted
