"""PostgreSQL implementation of PrivateProfile repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import PrivateProfile
from life.domain.repository import PrivateProfileRepository
from life.domain.value import IdentityId
from life.persistence.mappers import private_profile_to_dict, row_to_private_profile
from life.persistence.tables import private_profiles_table


class PostgresPrivateProfileRepository(PrivateProfileRepository):
    """PostgreSQL implementation of PrivateProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: IdentityId) -> PrivateProfile | None:
        """Find the identity's private profile."""
        stmt = select(private_profiles_table).where(
            private_profiles_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_private_profile(dict(row)) if row else None

    async def upsert(self, private_profile: PrivateProfile) -> PrivateProfile:
        """Insert or update the identity's private profile.

        Conflicts on `user_id` turn into an update, so two concurrent first
        writes still leave a single row.
        """
        profile_dict = private_profile_to_dict(private_profile)
        updatable = {
            key: value
            for key, value in profile_dict.items()
            if key not in ("id", "user_id", "created_at")
        }
        stmt = (
            insert(private_profiles_table)
            .values(**profile_dict)
            .on_conflict_do_update(index_elements=["user_id"], set_=updatable)
            .returning(private_profiles_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_private_profile(dict(row))
