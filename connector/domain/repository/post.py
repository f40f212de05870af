"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.post import Post
from connector.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Posts are stored and replaced whole, likes and comments included.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            for_update: Lock the post until the current transaction ends,
                for load-modify-save sequences

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts written by ``author_id``."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or whole-document replace)."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every post written by ``author_id``.

        Returns:
            Number of posts deleted
        """
        pass
