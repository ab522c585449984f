"""Unit tests for DecisionService."""

from uuid import uuid4

import pytest

from life.domain.error import NotFoundError, ValidationError
from life.domain.service import DecisionService
from life.domain.value import DecisionId, IdentityId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDecisionCrud:
    """Tests for creating, reading, updating and deleting decisions."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, unit_env):
        """A created decision can be read back by its owner."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())

        created = await service.create(
            user_id, "Move to Lisbon", 4, tags=["home"], category="place"
        )
        fetched = await service.get(user_id, created.id)

        assert fetched.title == "Move to Lisbon"
        assert fetched.confidence_level == 4
        assert fetched.tags == ["home"]
        assert fetched.reflections == []

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        """Decisions are listed newest first."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())
        older = await service.create(user_id, "First", 3)
        newer = await service.create(user_id, "Second", 3)

        decisions = await service.get_all(user_id)

        assert [d.id for d in decisions] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_confidence_out_of_range(self, unit_env):
        """Confidence must be between 1 and 5."""
        service = await unit_env.get(DecisionService)

        with pytest.raises(ValueError):
            await service.create(IdentityId(uuid4()), "Too sure", 6)

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        """Only the given fields change."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())
        created = await service.create(user_id, "Take the job", 2, description="Offer")

        updated = await service.update(user_id, created.id, {"confidence_level": 5})

        assert updated.confidence_level == 5
        assert updated.description == "Offer"
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_update_protected_field_rejected(self, unit_env):
        """Ownership cannot be changed through an update."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())
        created = await service.create(user_id, "Keep mine", 3)

        with pytest.raises(ValidationError):
            await service.update(user_id, created.id, {"user_id": uuid4()})

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        """A deleted decision is gone."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())
        created = await service.create(user_id, "Short lived", 1)

        await service.delete(user_id, created.id)

        with pytest.raises(NotFoundError):
            await service.get(user_id, created.id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        """Deleting a missing decision raises NotFoundError."""
        service = await unit_env.get(DecisionService)

        with pytest.raises(NotFoundError):
            await service.delete(IdentityId(uuid4()), DecisionId(uuid4()))


class TestReflections:
    """Tests for reflections on decisions."""

    @pytest.mark.asyncio
    async def test_reflections_attached_oldest_first(self, unit_env):
        """Reflections come back with the decision in the order written."""
        service = await unit_env.get(DecisionService)
        user_id = IdentityId(uuid4())
        decision = await service.create(user_id, "Adopt a dog", 4)

        first = await service.add_reflection(user_id, decision.id, "Good call")
        second = await service.add_reflection(user_id, decision.id, "Still good")
        fetched = await service.get(user_id, decision.id)

        assert [r.id for r in fetched.reflections] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_reflection_on_missing_decision(self, unit_env):
        """Reflecting on a missing decision raises NotFoundError."""
        service = await unit_env.get(DecisionService)

        with pytest.raises(NotFoundError):
            await service.add_reflection(
                IdentityId(uuid4()), DecisionId(uuid4()), "Hmm"
            )


class TestIdentityScoping:
    """Decisions are invisible to other identities."""

    @pytest.mark.asyncio
    async def test_other_identity_cannot_read(self, unit_env):
        """Another identity's decision reads as not found."""
        service = await unit_env.get(DecisionService)
        owner = IdentityId(uuid4())
        intruder = IdentityId(uuid4())
        decision = await service.create(owner, "Private", 3)

        with pytest.raises(NotFoundError):
            await service.get(intruder, decision.id)
        assert await service.get_all(intruder) == []

    @pytest.mark.asyncio
    async def test_other_identity_cannot_update_or_delete(self, unit_env):
        """Updates and deletes by another identity fail and change nothing."""
        service = await unit_env.get(DecisionService)
        owner = IdentityId(uuid4())
        intruder = IdentityId(uuid4())
        decision = await service.create(owner, "Private", 3)

        with pytest.raises(NotFoundError):
            await service.update(intruder, decision.id, {"title": "Mine now"})
        with pytest.raises(NotFoundError):
            await service.delete(intruder, decision.id)
        with pytest.raises(NotFoundError):
            await service.add_reflection(intruder, decision.id, "Sneaky")

        stored = await service.get(owner, decision.id)
        assert stored.title == "Private"
        assert stored.reflections == []
