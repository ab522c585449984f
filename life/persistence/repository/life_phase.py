"""PostgreSQL implementation of LifePhase repository."""

from collections import defaultdict

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import Goal, LifePhase
from life.domain.repository import LifePhaseRepository
from life.domain.value import GoalId, IdentityId, LifePhaseId
from life.persistence.mappers import (
    goal_to_dict,
    life_phase_to_dict,
    row_to_goal,
    row_to_life_phase,
)
from life.persistence.tables import goals_table, life_phases_table


class PostgresLifePhaseRepository(LifePhaseRepository):
    """PostgreSQL implementation of LifePhaseRepository.

    The one-active-phase rule is backed by a partial unique index on
    `user_id WHERE is_active`; `set_active` keeps the data consistent with
    it by switching the flag inside a single savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self, user_id: IdentityId) -> list[LifePhase]:
        """List an identity's phases, latest start date first, with goals."""
        stmt = (
            select(life_phases_table)
            .where(life_phases_table.c.user_id == user_id)
            .order_by(life_phases_table.c.start_date.desc())
        )
        result = await self.session.execute(stmt)
        phases = [row_to_life_phase(dict(row)) for row in result.mappings().all()]
        return await self._with_goals(user_id, phases)

    async def find_by_id(
        self, user_id: IdentityId, phase_id: LifePhaseId
    ) -> LifePhase | None:
        """Find one of an identity's phases with its goals."""
        stmt = select(life_phases_table).where(
            life_phases_table.c.id == phase_id,
            life_phases_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        phases = await self._with_goals(user_id, [row_to_life_phase(dict(row))])
        return phases[0]

    async def find_active(self, user_id: IdentityId) -> LifePhase | None:
        """Find the identity's active phase, if any."""
        stmt = select(life_phases_table).where(
            life_phases_table.c.user_id == user_id,
            life_phases_table.c.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        phases = await self._with_goals(user_id, [row_to_life_phase(dict(row))])
        return phases[0]

    async def save(self, phase: LifePhase) -> LifePhase:
        """Save a phase (create or update) without touching the active flag."""
        existing = await self.find_by_id(phase.user_id, phase.id)
        phase_dict = life_phase_to_dict(phase)

        if existing:
            stmt = (
                life_phases_table.update()
                .where(
                    life_phases_table.c.id == phase.id,
                    life_phases_table.c.user_id == phase.user_id,
                )
                .values(**phase_dict)
            )
        else:
            stmt = insert(life_phases_table).values(**phase_dict, is_active=False)
        await self.session.execute(stmt)
        await self.session.flush()

        return await self.find_by_id(phase.user_id, phase.id) or phase

    async def set_active(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Make a phase the identity's only active phase.

        Locks every phase row of the identity, then clears and sets the flag
        inside one savepoint. Concurrent switches for the same identity queue
        on the row locks; a failure rolls back to the previous active phase.

        Args:
            user_id: Owning identity
            phase_id: Phase to activate

        Returns:
            True if the phase was activated, False if missing or not owned
        """
        table = life_phases_table
        async with self.session.begin_nested():
            await self.session.execute(
                select(table.c.id).where(table.c.user_id == user_id).with_for_update()
            )

            target = await self.session.execute(
                select(table.c.id).where(
                    table.c.id == phase_id, table.c.user_id == user_id
                )
            )
            if target.first() is None:
                return False

            await self.session.execute(
                update(table)
                .where(
                    table.c.user_id == user_id,
                    table.c.id != phase_id,
                    table.c.is_active.is_(True),
                )
                .values(is_active=False)
            )
            await self.session.execute(
                update(table)
                .where(table.c.id == phase_id, table.c.user_id == user_id)
                .values(is_active=True)
            )

        await self.session.flush()
        return True

    async def deactivate(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Clear the active flag on one of an identity's phases."""
        stmt = (
            update(life_phases_table)
            .where(
                life_phases_table.c.id == phase_id,
                life_phases_table.c.user_id == user_id,
            )
            .values(is_active=False)
            .returning(life_phases_table.c.id)
        )
        result = await self.session.execute(stmt)
        found = result.first() is not None
        await self.session.flush()
        return found

    async def delete(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Delete a phase; goals cascade, linked records keep a null phase."""
        stmt = (
            delete(life_phases_table)
            .where(
                life_phases_table.c.id == phase_id,
                life_phases_table.c.user_id == user_id,
            )
            .returning(life_phases_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def find_goal(self, user_id: IdentityId, goal_id: GoalId) -> Goal | None:
        """Find one of an identity's goals."""
        stmt = select(goals_table).where(
            goals_table.c.id == goal_id,
            goals_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_goal(dict(row)) if row else None

    async def save_goal(self, goal: Goal) -> Goal:
        """Save a goal (create or update)."""
        existing = await self.find_goal(goal.user_id, goal.id)
        goal_dict = goal_to_dict(goal)

        if existing:
            stmt = (
                goals_table.update()
                .where(
                    goals_table.c.id == goal.id,
                    goals_table.c.user_id == goal.user_id,
                )
                .values(**goal_dict)
            )
        else:
            stmt = insert(goals_table).values(**goal_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return goal

    async def _with_goals(
        self, user_id: IdentityId, phases: list[LifePhase]
    ) -> list[LifePhase]:
        """Attach goals to phases in one query, oldest goal first."""
        if not phases:
            return []

        stmt = (
            select(goals_table)
            .where(
                goals_table.c.phase_id.in_([phase.id for phase in phases]),
                goals_table.c.user_id == user_id,
            )
            .order_by(goals_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)

        by_phase: dict[LifePhaseId, list[Goal]] = defaultdict(list)
        for row in result.mappings().all():
            goal = row_to_goal(dict(row))
            by_phase[goal.phase_id].append(goal)

        return [
            phase.model_copy(update={"goals": by_phase.get(phase.id, [])})
            for phase in phases
        ]
