"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.error import ProfileAlreadyExistsError
from connector.domain.model import Profile
from connector.domain.repository.profile import ProfileRepository
from connector.domain.value import UserId
from connector.persistence.mappers import profile_to_dict, row_to_profile
from connector.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository.

    The unique ``user_id`` column enforces one profile per user.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[Profile]:
        """Find the profile owned by a user."""
        with logfire.span(
            "profile_repository.find_by_user",
            user_id=str(user_id),
            for_update=for_update,
        ):
            stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
            if for_update:
                stmt = stmt.with_for_update()

            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_profile(dict(row)) if row else None

    async def find_all(self) -> List[Profile]:
        stmt = select(profiles_table).order_by(profiles_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or whole-row replace).

        Raises:
            ProfileAlreadyExistsError: If another request created the
                user's profile first
        """
        with logfire.span("profile_repository.save", profile_id=str(profile.id)):
            profile_dict = profile_to_dict(profile)

            existing = await self.session.execute(
                select(profiles_table.c.id).where(profiles_table.c.id == profile.id)
            )
            if existing.first():
                stmt = (
                    profiles_table.update()
                    .where(profiles_table.c.id == profile.id)
                    .values(**profile_dict)
                )
                await self.session.execute(stmt)
            else:
                logfire.info("Inserting new profile", profile_id=str(profile.id))
                try:
                    async with self.session.begin_nested():
                        await self.session.execute(
                            profiles_table.insert().values(**profile_dict)
                        )
                except IntegrityError as e:
                    logfire.warn("Concurrent profile creation", user_id=str(profile.user_id))
                    raise ProfileAlreadyExistsError(str(profile.user_id)) from e

            await self.session.flush()
            return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        stmt = profiles_table.delete().where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
