"""Decision domain service."""

from typing import Any
from uuid import uuid4

import logfire

from life.domain.error import NotFoundError
from life.domain.model import Decision, Reflection
from life.domain.repository import DecisionRepository
from life.domain.value import DecisionId, IdentityId, LifePhaseId, ReflectionId

from .base import Service, apply_changes

UPDATABLE_FIELDS = frozenset(
    {"title", "description", "confidence_level", "category", "tags", "life_phase_id"}
)


class DecisionService(Service):
    """Domain service for decisions and their reflections.

    All operations take the calling identity and never reach rows owned by
    anyone else; such rows surface as NotFoundError.
    """

    def __init__(self, decision_repository: DecisionRepository) -> None:
        """Initialize decision service.

        Args:
            decision_repository: Decision repository
        """
        self.decision_repository = decision_repository

    async def get_all(self, user_id: IdentityId) -> list[Decision]:
        """List the identity's decisions, newest first.

        Args:
            user_id: Calling identity

        Returns:
            Decisions with their reflections
        """
        with logfire.span("decision_service.get_all", user_id=str(user_id)):
            decisions = await self.decision_repository.find_all(user_id)
            logfire.info("Decisions listed", user_id=str(user_id), count=len(decisions))
            return decisions

    async def get(self, user_id: IdentityId, decision_id: DecisionId) -> Decision:
        """Get one decision.

        Args:
            user_id: Calling identity
            decision_id: Decision ID

        Returns:
            The decision with its reflections

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span(
            "decision_service.get", user_id=str(user_id), decision_id=str(decision_id)
        ):
            decision = await self.decision_repository.find_by_id(user_id, decision_id)
            if not decision:
                logfire.warn("Decision not found", decision_id=str(decision_id))
                raise NotFoundError("Decision", str(decision_id))
            return decision

    async def create(
        self,
        user_id: IdentityId,
        title: str,
        confidence_level: int,
        description: str = "",
        category: str | None = None,
        tags: list[str] | None = None,
        life_phase_id: LifePhaseId | None = None,
    ) -> Decision:
        """Log a new decision.

        Args:
            user_id: Calling identity
            title: Short title
            confidence_level: Confidence from 1 to 5
            description: Optional longer description
            category: Optional category
            tags: Optional tags
            life_phase_id: Optional phase the decision belongs to

        Returns:
            Created decision
        """
        with logfire.span("decision_service.create", user_id=str(user_id)):
            decision = Decision(
                id=DecisionId(uuid4()),
                user_id=user_id,
                title=title,
                description=description,
                confidence_level=confidence_level,
                category=category,
                tags=tags or [],
                life_phase_id=life_phase_id,
            )
            saved = await self.decision_repository.save(decision)
            logfire.info(
                "Decision created", decision_id=str(saved.id), user_id=str(user_id)
            )
            return saved

    async def update(
        self, user_id: IdentityId, decision_id: DecisionId, changes: dict[str, Any]
    ) -> Decision:
        """Apply a partial update to a decision.

        Args:
            user_id: Calling identity
            decision_id: Decision ID
            changes: Fields to change

        Returns:
            Updated decision

        Raises:
            NotFoundError: If missing or owned by another identity
            ValidationError: If a change is not allowed or invalid
        """
        with logfire.span(
            "decision_service.update",
            decision_id=str(decision_id),
            fields=sorted(changes),
        ):
            decision = await self.get(user_id, decision_id)
            updated = apply_changes(decision, changes, UPDATABLE_FIELDS)
            return await self.decision_repository.save(updated)

    async def delete(self, user_id: IdentityId, decision_id: DecisionId) -> None:
        """Delete a decision and its reflections.

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span("decision_service.delete", decision_id=str(decision_id)):
            deleted = await self.decision_repository.delete(user_id, decision_id)
            if not deleted:
                raise NotFoundError("Decision", str(decision_id))
            logfire.info("Decision deleted", decision_id=str(decision_id))

    async def add_reflection(
        self, user_id: IdentityId, decision_id: DecisionId, content: str
    ) -> Reflection:
        """Add a reflection to a decision.

        Args:
            user_id: Calling identity
            decision_id: Decision being reflected on
            content: Reflection text

        Returns:
            Created reflection

        Raises:
            NotFoundError: If the decision is missing or owned by another identity
        """
        with logfire.span(
            "decision_service.add_reflection", decision_id=str(decision_id)
        ):
            await self.get(user_id, decision_id)
            reflection = Reflection(
                id=ReflectionId(uuid4()),
                decision_id=decision_id,
                user_id=user_id,
                content=content,
            )
            saved = await self.decision_repository.add_reflection(reflection)
            logfire.info(
                "Reflection added",
                decision_id=str(decision_id),
                reflection_id=str(saved.id),
            )
            return saved
