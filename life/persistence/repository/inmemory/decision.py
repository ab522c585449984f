"""In-memory decision repository for testing."""

from life.domain.model.decision import Decision, Reflection
from life.domain.repository.decision import DecisionRepository
from life.domain.value import DecisionId, IdentityId


class InMemoryDecisionRepository(DecisionRepository):
    """In-memory implementation of DecisionRepository for testing.

    Lookups match on both id and owner, like the SQL predicates.
    """

    def __init__(self) -> None:
        self._decisions: dict[DecisionId, Decision] = {}
        self._reflections: list[Reflection] = []

    async def find_all(self, user_id: IdentityId) -> list[Decision]:
        """List an identity's decisions, newest first."""
        # Reversed insertion order so equal timestamps still list newest first
        owned = [d for d in reversed(self._decisions.values()) if d.user_id == user_id]
        owned.sort(key=lambda d: d.created_at, reverse=True)
        return [self._with_reflections(d) for d in owned]

    async def find_by_id(
        self, user_id: IdentityId, decision_id: DecisionId
    ) -> Decision | None:
        """Find one of an identity's decisions."""
        decision = self._decisions.get(decision_id)
        if not decision or decision.user_id != user_id:
            return None
        return self._with_reflections(decision)

    async def save(self, decision: Decision) -> Decision:
        """Save or update a decision."""
        existing = self._decisions.get(decision.id)
        if existing and existing.user_id != decision.user_id:
            return decision
        self._decisions[decision.id] = decision.model_copy(update={"reflections": []})
        return self._with_reflections(decision)

    async def delete(self, user_id: IdentityId, decision_id: DecisionId) -> bool:
        """Delete a decision and its reflections."""
        decision = self._decisions.get(decision_id)
        if not decision or decision.user_id != user_id:
            return False
        del self._decisions[decision_id]
        self._reflections = [
            r for r in self._reflections if r.decision_id != decision_id
        ]
        return True

    async def add_reflection(self, reflection: Reflection) -> Reflection:
        """Attach a reflection to a decision."""
        self._reflections.append(reflection)
        return reflection

    def _with_reflections(self, decision: Decision) -> Decision:
        reflections = sorted(
            (
                r
                for r in self._reflections
                if r.decision_id == decision.id and r.user_id == decision.user_id
            ),
            key=lambda r: r.created_at,
        )
        return decision.model_copy(update={"reflections": reflections})
