"""PostgreSQL implementation of Profile repository."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import Preferences, Profile
from life.domain.model.common import utc_now
from life.domain.repository import ProfileRepository
from life.domain.value import IdentityId, Username
from life.persistence.mappers import profile_to_dict, row_to_profile
from life.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find the profile owned by an identity.

        Args:
            identity_id: Identity ID

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(profiles_table).where(profiles_table.c.id == identity_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Runs in a savepoint so a unique violation leaves the request's
        transaction usable for the caller's recovery path.
        """
        existing = await self.find_by_id(profile.id)
        profile_dict = profile_to_dict(profile)

        async with self.session.begin_nested():
            if existing:
                stmt = (
                    profiles_table.update()
                    .where(profiles_table.c.id == profile.id)
                    .values(**profile_dict)
                )
            else:
                stmt = profiles_table.insert().values(**profile_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return profile

    async def username_exists(self, username: str) -> bool:
        """Check whether any profile holds a username, ignoring case."""
        stmt = (
            select(profiles_table.c.id)
            .where(func.lower(profiles_table.c.username) == username.lower())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def update_username(
        self, identity_id: IdentityId, username: Username
    ) -> Profile | None:
        """Set the username on an identity's profile.

        The unique index on lower(username) arbitrates concurrent claims.
        """
        stmt = (
            profiles_table.update()
            .where(profiles_table.c.id == identity_id)
            .values(username=username.root, updated_at=utc_now())
            .returning(profiles_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        await self.session.flush()
        return row_to_profile(dict(row)) if row else None

    async def update_preferences(
        self, identity_id: IdentityId, preferences: Preferences
    ) -> Profile | None:
        """Replace an identity's preference set."""
        stmt = (
            profiles_table.update()
            .where(profiles_table.c.id == identity_id)
            .values(
                preferences=preferences.model_dump(mode="json"),
                updated_at=utc_now(),
            )
            .returning(profiles_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_profile(dict(row)) if row else None

    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile; foreign keys cascade to owned records."""
        stmt = (
            delete(profiles_table)
            .where(profiles_table.c.id == identity_id)
            .returning(profiles_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
