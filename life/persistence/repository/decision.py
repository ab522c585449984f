"""PostgreSQL implementation of Decision repository."""

from collections import defaultdict

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import Decision, Reflection
from life.domain.repository import DecisionRepository
from life.domain.value import DecisionId, IdentityId
from life.persistence.mappers import (
    decision_to_dict,
    reflection_to_dict,
    row_to_decision,
    row_to_reflection,
)
from life.persistence.tables import decisions_table, reflections_table


class PostgresDecisionRepository(DecisionRepository):
    """PostgreSQL implementation of DecisionRepository.

    Every statement carries a `user_id` predicate.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self, user_id: IdentityId) -> list[Decision]:
        """List an identity's decisions, newest first, with reflections."""
        stmt = (
            select(decisions_table)
            .where(decisions_table.c.user_id == user_id)
            .order_by(decisions_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        decisions = [row_to_decision(dict(row)) for row in result.mappings().all()]
        if not decisions:
            return []

        reflections = await self._load_reflections(user_id, [d.id for d in decisions])
        return [
            d.model_copy(update={"reflections": reflections.get(d.id, [])})
            for d in decisions
        ]

    async def find_by_id(
        self, user_id: IdentityId, decision_id: DecisionId
    ) -> Decision | None:
        """Find one of an identity's decisions with its reflections."""
        stmt = select(decisions_table).where(
            decisions_table.c.id == decision_id,
            decisions_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        decision = row_to_decision(dict(row))
        reflections = await self._load_reflections(user_id, [decision.id])
        return decision.model_copy(update={"reflections": reflections.get(decision.id, [])})

    async def save(self, decision: Decision) -> Decision:
        """Save a decision (create or update)."""
        existing = await self.find_by_id(decision.user_id, decision.id)
        decision_dict = decision_to_dict(decision)

        if existing:
            stmt = (
                decisions_table.update()
                .where(
                    decisions_table.c.id == decision.id,
                    decisions_table.c.user_id == decision.user_id,
                )
                .values(**decision_dict)
            )
            await self.session.execute(stmt)
            decision = decision.model_copy(update={"reflections": existing.reflections})
        else:
            stmt = insert(decisions_table).values(**decision_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return decision

    async def delete(self, user_id: IdentityId, decision_id: DecisionId) -> bool:
        """Delete a decision; reflections cascade."""
        stmt = (
            delete(decisions_table)
            .where(
                decisions_table.c.id == decision_id,
                decisions_table.c.user_id == user_id,
            )
            .returning(decisions_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def add_reflection(self, reflection: Reflection) -> Reflection:
        """Attach a reflection to a decision."""
        stmt = insert(reflections_table).values(**reflection_to_dict(reflection))
        await self.session.execute(stmt)
        await self.session.flush()
        return reflection

    async def _load_reflections(
        self, user_id: IdentityId, decision_ids: list[DecisionId]
    ) -> dict[DecisionId, list[Reflection]]:
        """Load reflections for a batch of decisions, oldest first."""
        stmt = (
            select(reflections_table)
            .where(
                reflections_table.c.decision_id.in_(decision_ids),
                reflections_table.c.user_id == user_id,
            )
            .order_by(reflections_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)

        by_decision: dict[DecisionId, list[Reflection]] = defaultdict(list)
        for row in result.mappings().all():
            reflection = row_to_reflection(dict(row))
            by_decision[reflection.decision_id].append(reflection)
        return by_decision
