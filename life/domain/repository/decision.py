"""Decision repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import Decision, Reflection
from life.domain.value import DecisionId, IdentityId


class DecisionRepository(ABC):
    """Repository for Decision entity and its reflections.

    Every operation is scoped to the calling identity: rows owned by anyone
    else are invisible and untouchable.
    """

    @abstractmethod
    async def find_all(self, user_id: IdentityId) -> list[Decision]:
        """List an identity's decisions, newest first, with reflections.

        Args:
            user_id: Owning identity

        Returns:
            List of decisions
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, user_id: IdentityId, decision_id: DecisionId
    ) -> Decision | None:
        """Find one of an identity's decisions.

        Args:
            user_id: Owning identity
            decision_id: Decision ID

        Returns:
            The decision with reflections, None if missing or not owned
        """
        pass

    @abstractmethod
    async def save(self, decision: Decision) -> Decision:
        """Save a decision (create or update) owned by `decision.user_id`.

        Args:
            decision: The decision to save

        Returns:
            The saved decision
        """
        pass

    @abstractmethod
    async def delete(self, user_id: IdentityId, decision_id: DecisionId) -> bool:
        """Delete one of an identity's decisions and its reflections.

        Args:
            user_id: Owning identity
            decision_id: Decision ID

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def add_reflection(self, reflection: Reflection) -> Reflection:
        """Attach a reflection to a decision owned by `reflection.user_id`.

        Args:
            reflection: The reflection to store

        Returns:
            The stored reflection
        """
        pass
