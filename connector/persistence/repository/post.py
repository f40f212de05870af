"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import Post
from connector.domain.repository.post import PostRepository
from connector.domain.value import PostId, UserId
from connector.persistence.mappers import post_to_dict, row_to_post
from connector.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    ``for_update`` loads take a row lock (``SELECT ... FOR UPDATE``) held
    until the request's transaction commits, so concurrent like/comment
    edits of one post are applied one after another instead of the last
    write discarding the others.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span(
            "post_repository.find_by_id", post_id=str(post_id), for_update=for_update
        ):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if for_update:
                stmt = stmt.with_for_update()

            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count_by_author(self, author_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or whole-row replace)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            existing = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            if existing.first():
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_author(self, author_id: UserId) -> int:
        stmt = posts_table.delete().where(posts_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
