"""PostgreSQL implementation of InviteCode repository."""

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import InviteCode
from life.domain.repository import InviteCodeRepository
from life.domain.value import InviteCodeId, InviteCodeValue
from life.persistence.mappers import invite_code_to_dict, row_to_invite_code
from life.persistence.tables import invite_codes_table


class PostgresInviteCodeRepository(InviteCodeRepository):
    """PostgreSQL implementation of InviteCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_active_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        """Find an active invite code by its canonical value."""
        stmt = select(invite_codes_table).where(
            invite_codes_table.c.code == code.root,
            invite_codes_table.c.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_code(dict(row)) if row else None

    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save an invite code (create or update)."""
        existing = await self._find_by_id(invite_code.id)
        invite_dict = invite_code_to_dict(invite_code)

        async with self.session.begin_nested():
            if existing:
                stmt = (
                    invite_codes_table.update()
                    .where(invite_codes_table.c.id == invite_code.id)
                    .values(**invite_dict)
                )
            else:
                stmt = invite_codes_table.insert().values(**invite_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return invite_code

    async def redeem(self, code: InviteCodeValue) -> bool:
        """Atomically consume one use of an invite code.

        The guard lives in the WHERE clause of a single UPDATE, so the row
        lock taken by Postgres serializes concurrent redemptions and a losing
        caller simply matches zero rows.

        Args:
            code: Canonical invite code

        Returns:
            True if a use was consumed
        """
        table = invite_codes_table
        stmt = (
            update(table)
            .where(
                table.c.code == code.root,
                table.c.is_active.is_(True),
                or_(table.c.expires_at.is_(None), table.c.expires_at > func.now()),
                or_(table.c.max_uses.is_(None), table.c.current_uses < table.c.max_uses),
            )
            .values(current_uses=table.c.current_uses + 1)
            .returning(table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            redeemed = result.first() is not None

        await self.session.flush()
        return redeemed

    async def _find_by_id(self, invite_code_id: InviteCodeId) -> InviteCode | None:
        stmt = select(invite_codes_table).where(
            invite_codes_table.c.id == invite_code_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_code(dict(row)) if row else None
