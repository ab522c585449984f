"""Life phase domain service."""

from datetime import date
from typing import Any
from uuid import uuid4

import logfire

from life.domain.error import NotFoundError
from life.domain.model import Goal, LifePhase
from life.domain.repository import LifePhaseRepository
from life.domain.value import GoalId, GoalStatus, IdentityId, LifePhaseId

from .base import Service, apply_changes

UPDATABLE_FIELDS = frozenset(
    {"name", "description", "start_date", "end_date", "values"}
)
UPDATABLE_GOAL_FIELDS = frozenset({"title", "description", "status"})


class LifePhaseService(Service):
    """Domain service for life phases and goals.

    Business rules:
    - At most one active phase per identity; activation goes through the
      repository's atomic `set_active`
    - Every operation is scoped to the calling identity
    """

    def __init__(self, life_phase_repository: LifePhaseRepository) -> None:
        """Initialize life phase service.

        Args:
            life_phase_repository: Life phase repository
        """
        self.life_phase_repository = life_phase_repository

    async def get_all(self, user_id: IdentityId) -> list[LifePhase]:
        """List the identity's phases, most recent start date first."""
        with logfire.span("life_phase_service.get_all", user_id=str(user_id)):
            return await self.life_phase_repository.find_all(user_id)

    async def get(self, user_id: IdentityId, phase_id: LifePhaseId) -> LifePhase:
        """Get one phase with its goals.

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span("life_phase_service.get", phase_id=str(phase_id)):
            phase = await self.life_phase_repository.find_by_id(user_id, phase_id)
            if not phase:
                logfire.warn("Life phase not found", phase_id=str(phase_id))
                raise NotFoundError("LifePhase", str(phase_id))
            return phase

    async def get_active(self, user_id: IdentityId) -> LifePhase | None:
        """Get the identity's active phase, if any."""
        with logfire.span("life_phase_service.get_active", user_id=str(user_id)):
            return await self.life_phase_repository.find_active(user_id)

    async def create(
        self,
        user_id: IdentityId,
        name: str,
        start_date: date,
        description: str | None = None,
        end_date: date | None = None,
        is_active: bool = False,
        values: list[str] | None = None,
    ) -> LifePhase:
        """Create a phase, optionally making it the active one.

        Args:
            user_id: Calling identity
            name: Phase name
            start_date: When the phase began
            description: Optional description
            end_date: Optional end date
            is_active: Whether the new phase becomes the active phase
            values: Values the identity holds during the phase

        Returns:
            Created phase
        """
        with logfire.span(
            "life_phase_service.create", user_id=str(user_id), is_active=is_active
        ):
            phase = LifePhase(
                id=LifePhaseId(uuid4()),
                user_id=user_id,
                name=name,
                description=description,
                start_date=start_date,
                end_date=end_date,
                values=values or [],
            )
            saved = await self.life_phase_repository.save(phase)
            if is_active:
                await self.life_phase_repository.set_active(user_id, saved.id)
                saved = await self.get(user_id, saved.id)
            logfire.info("Life phase created", phase_id=str(saved.id))
            return saved

    async def update(
        self, user_id: IdentityId, phase_id: LifePhaseId, changes: dict[str, Any]
    ) -> LifePhase:
        """Apply a partial update to a phase.

        `is_active=True` switches the active phase atomically;
        `is_active=False` clears the flag on this phase only.

        Raises:
            NotFoundError: If missing or owned by another identity
            ValidationError: If a change is not allowed or invalid
        """
        with logfire.span(
            "life_phase_service.update", phase_id=str(phase_id), fields=sorted(changes)
        ):
            fields = dict(changes)
            is_active = fields.pop("is_active", None)

            phase = await self.get(user_id, phase_id)
            if fields:
                await self.life_phase_repository.save(
                    apply_changes(phase, fields, UPDATABLE_FIELDS)
                )

            if is_active is True:
                await self.life_phase_repository.set_active(user_id, phase_id)
                logfire.info("Life phase activated", phase_id=str(phase_id))
            elif is_active is False:
                await self.life_phase_repository.deactivate(user_id, phase_id)

            return await self.get(user_id, phase_id)

    async def delete(self, user_id: IdentityId, phase_id: LifePhaseId) -> None:
        """Delete a phase and its goals.

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span("life_phase_service.delete", phase_id=str(phase_id)):
            deleted = await self.life_phase_repository.delete(user_id, phase_id)
            if not deleted:
                raise NotFoundError("LifePhase", str(phase_id))
            logfire.info("Life phase deleted", phase_id=str(phase_id))

    async def add_goal(
        self,
        user_id: IdentityId,
        phase_id: LifePhaseId,
        title: str,
        description: str | None = None,
    ) -> Goal:
        """Add an active goal to a phase.

        Raises:
            NotFoundError: If the phase is missing or owned by another identity
        """
        with logfire.span("life_phase_service.add_goal", phase_id=str(phase_id)):
            await self.get(user_id, phase_id)
            goal = Goal(
                id=GoalId(uuid4()),
                phase_id=phase_id,
                user_id=user_id,
                title=title,
                description=description,
                status=GoalStatus.ACTIVE,
            )
            saved = await self.life_phase_repository.save_goal(goal)
            logfire.info("Goal added", phase_id=str(phase_id), goal_id=str(saved.id))
            return saved

    async def update_goal(
        self, user_id: IdentityId, goal_id: GoalId, changes: dict[str, Any]
    ) -> Goal:
        """Apply a partial update (title, description, status) to a goal.

        Raises:
            NotFoundError: If missing or owned by another identity
            ValidationError: If a change is not allowed or invalid
        """
        with logfire.span(
            "life_phase_service.update_goal", goal_id=str(goal_id), fields=sorted(changes)
        ):
            goal = await self.life_phase_repository.find_goal(user_id, goal_id)
            if not goal:
                logfire.warn("Goal not found", goal_id=str(goal_id))
                raise NotFoundError("Goal", str(goal_id))
            updated = apply_changes(goal, changes, UPDATABLE_GOAL_FIELDS)
            return await self.life_phase_repository.save_goal(updated)
