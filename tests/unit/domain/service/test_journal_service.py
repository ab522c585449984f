"""Unit tests for JournalService."""

from uuid import uuid4

import pytest

from life.domain.error import NotFoundError, ValidationError
from life.domain.service import JournalService
from life.domain.value import IdentityId, Mood
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestJournalService:
    """Tests for journal entries."""

    @pytest.mark.asyncio
    async def test_create_with_mood(self, unit_env):
        """Entries keep their mood tag."""
        service = await unit_env.get(JournalService)
        user_id = IdentityId(uuid4())

        entry = await service.create(user_id, "Quiet day.", mood=Mood.CALM)

        fetched = await service.get(user_id, entry.id)
        assert fetched.mood == Mood.CALM
        assert fetched.title is None

    @pytest.mark.asyncio
    async def test_update_mood_from_string(self, unit_env):
        """A mood given as its value is accepted."""
        service = await unit_env.get(JournalService)
        user_id = IdentityId(uuid4())
        entry = await service.create(user_id, "Busy day.")

        updated = await service.update(user_id, entry.id, {"mood": "hopeful"})

        assert updated.mood == Mood.HOPEFUL
        assert updated.content == "Busy day."

    @pytest.mark.asyncio
    async def test_update_unknown_mood_rejected(self, unit_env):
        """Moods outside the fixed set are rejected."""
        service = await unit_env.get(JournalService)
        user_id = IdentityId(uuid4())
        entry = await service.create(user_id, "Hmm.")

        with pytest.raises(ValidationError):
            await service.update(user_id, entry.id, {"mood": "furious"})

    @pytest.mark.asyncio
    async def test_list_only_own_entries(self, unit_env):
        """Listing never includes another identity's entries."""
        service = await unit_env.get(JournalService)
        mine = IdentityId(uuid4())
        theirs = IdentityId(uuid4())
        await service.create(mine, "Mine")
        await service.create(theirs, "Theirs")

        entries = await service.get_all(mine)

        assert [e.content for e in entries] == ["Mine"]

    @pytest.mark.asyncio
    async def test_cross_identity_access_not_found(self, unit_env):
        """Another identity can neither read, update nor delete an entry."""
        service = await unit_env.get(JournalService)
        owner = IdentityId(uuid4())
        intruder = IdentityId(uuid4())
        entry = await service.create(owner, "Secret")

        with pytest.raises(NotFoundError):
            await service.get(intruder, entry.id)
        with pytest.raises(NotFoundError):
            await service.update(intruder, entry.id, {"content": "Changed"})
        with pytest.raises(NotFoundError):
            await service.delete(intruder, entry.id)

        assert (await service.get(owner, entry.id)).content == "Secret"

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        """A deleted entry is gone."""
        service = await unit_env.get(JournalService)
        user_id = IdentityId(uuid4())
        entry = await service.create(user_id, "Bye")

        await service.delete(user_id, entry.id)

        assert await service.get_all(user_id) == []
