"""SQLAlchemy implementation of the transaction port."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Atomic blocks as savepoints inside the request's transaction.

    Rolling back a savepoint leaves the outer transaction usable, so the
    request session can still commit whatever ran before the block.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        savepoint = await self.session.begin_nested()
        try:
            yield
        except Exception:
            logfire.warn("Rolling back to savepoint")
            await savepoint.rollback()
            raise
        await savepoint.commit()
