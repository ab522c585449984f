"""Life phase repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import Goal, LifePhase
from life.domain.value import GoalId, IdentityId, LifePhaseId


class LifePhaseRepository(ABC):
    """Repository for LifePhase entity and its goals.

    Every operation is scoped to the calling identity.
    """

    @abstractmethod
    async def find_all(self, user_id: IdentityId) -> list[LifePhase]:
        """List an identity's phases by start date, newest first, with goals.

        Args:
            user_id: Owning identity

        Returns:
            List of phases
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, user_id: IdentityId, phase_id: LifePhaseId
    ) -> LifePhase | None:
        """Find one of an identity's phases.

        Args:
            user_id: Owning identity
            phase_id: Phase ID

        Returns:
            The phase with goals, None if missing or not owned
        """
        pass

    @abstractmethod
    async def find_active(self, user_id: IdentityId) -> LifePhase | None:
        """Find the identity's active phase, if any."""
        pass

    @abstractmethod
    async def save(self, phase: LifePhase) -> LifePhase:
        """Save a phase (create or update) owned by `phase.user_id`.

        Neither goals nor the active flag are written here; use `save_goal`,
        `set_active` and `deactivate`. New phases are stored inactive.

        Args:
            phase: The phase to save

        Returns:
            The saved phase
        """
        pass

    @abstractmethod
    async def set_active(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Make a phase the identity's only active phase.

        Clearing the other phases and activating the target happen in one
        atomic operation; no caller can observe two active phases or a
        half-applied switch.

        Args:
            user_id: Owning identity
            phase_id: Phase to activate

        Returns:
            True if the phase was activated, False if missing or not owned
        """
        pass

    @abstractmethod
    async def deactivate(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Clear the active flag on one of an identity's phases.

        Returns:
            True if the phase exists and is owned by the identity
        """
        pass

    @abstractmethod
    async def delete(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Delete one of an identity's phases and its goals.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def find_goal(self, user_id: IdentityId, goal_id: GoalId) -> Goal | None:
        """Find one of an identity's goals. None if missing or not owned."""
        pass

    @abstractmethod
    async def save_goal(self, goal: Goal) -> Goal:
        """Save a goal (create or update) owned by `goal.user_id`."""
        pass
