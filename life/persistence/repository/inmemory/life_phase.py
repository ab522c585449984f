"""In-memory life phase repository for testing."""

from life.domain.model.life_phase import Goal, LifePhase
from life.domain.repository.life_phase import LifePhaseRepository
from life.domain.value import GoalId, IdentityId, LifePhaseId


class InMemoryLifePhaseRepository(LifePhaseRepository):
    """In-memory implementation of LifePhaseRepository for testing.

    `set_active` never awaits between clearing and setting the flag, so no
    other task can observe an intermediate state.
    """

    def __init__(self) -> None:
        self._phases: dict[LifePhaseId, LifePhase] = {}
        self._goals: dict[GoalId, Goal] = {}

    async def find_all(self, user_id: IdentityId) -> list[LifePhase]:
        """List an identity's phases, latest start date first."""
        owned = [p for p in self._phases.values() if p.user_id == user_id]
        owned.sort(key=lambda p: p.start_date, reverse=True)
        return [self._with_goals(p) for p in owned]

    async def find_by_id(
        self, user_id: IdentityId, phase_id: LifePhaseId
    ) -> LifePhase | None:
        """Find one of an identity's phases."""
        phase = self._owned(user_id, phase_id)
        return self._with_goals(phase) if phase else None

    async def find_active(self, user_id: IdentityId) -> LifePhase | None:
        """Find the identity's active phase, if any."""
        for phase in self._phases.values():
            if phase.user_id == user_id and phase.is_active:
                return self._with_goals(phase)
        return None

    async def save(self, phase: LifePhase) -> LifePhase:
        """Save or update a phase, keeping the stored active flag."""
        existing = self._phases.get(phase.id)
        if existing and existing.user_id != phase.user_id:
            return phase
        is_active = existing.is_active if existing else False
        self._phases[phase.id] = phase.model_copy(
            update={"is_active": is_active, "goals": []}
        )
        return self._with_goals(self._phases[phase.id])

    async def set_active(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Make a phase the identity's only active phase."""
        if not self._owned(user_id, phase_id):
            return False
        for other in list(self._phases.values()):
            if other.user_id == user_id:
                self._phases[other.id] = other.model_copy(
                    update={"is_active": other.id == phase_id}
                )
        return True

    async def deactivate(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Clear the active flag on one of an identity's phases."""
        phase = self._owned(user_id, phase_id)
        if not phase:
            return False
        self._phases[phase_id] = phase.model_copy(update={"is_active": False})
        return True

    async def delete(self, user_id: IdentityId, phase_id: LifePhaseId) -> bool:
        """Delete a phase and its goals."""
        if not self._owned(user_id, phase_id):
            return False
        del self._phases[phase_id]
        self._goals = {
            goal_id: goal
            for goal_id, goal in self._goals.items()
            if goal.phase_id != phase_id
        }
        return True

    async def find_goal(self, user_id: IdentityId, goal_id: GoalId) -> Goal | None:
        """Find one of an identity's goals."""
        goal = self._goals.get(goal_id)
        if not goal or goal.user_id != user_id:
            return None
        return goal

    async def save_goal(self, goal: Goal) -> Goal:
        """Save or update a goal."""
        existing = self._goals.get(goal.id)
        if existing and existing.user_id != goal.user_id:
            return goal
        self._goals[goal.id] = goal
        return goal

    def _owned(self, user_id: IdentityId, phase_id: LifePhaseId) -> LifePhase | None:
        phase = self._phases.get(phase_id)
        if not phase or phase.user_id != user_id:
            return None
        return phase

    def _with_goals(self, phase: LifePhase) -> LifePhase:
        goals = sorted(
            (
                g
                for g in self._goals.values()
                if g.phase_id == phase.id and g.user_id == phase.user_id
            ),
            key=lambda g: g.created_at,
        )
        return phase.model_copy(update={"goals": goals})
