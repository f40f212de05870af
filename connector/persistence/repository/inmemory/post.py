"""In-memory post repository for testing."""

from typing import Optional

from connector.domain.model.post import Post
from connector.domain.repository.post import PostRepository
from connector.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    ``for_update`` is accepted and ignored: there is no isolation here.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def snapshot(self) -> dict[PostId, Post]:
        return dict(self._posts)

    def restore(self, snapshot: dict[PostId, Post]) -> None:
        self._posts = dict(snapshot)

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def count_by_author(self, author_id: UserId) -> int:
        return sum(1 for p in self._posts.values() if p.author_id == author_id)

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        self._posts.pop(post_id, None)

    async def delete_by_author(self, author_id: UserId) -> int:
        doomed = [pid for pid, p in self._posts.items() if p.author_id == author_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)
