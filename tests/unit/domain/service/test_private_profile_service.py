"""Unit tests for PrivateProfileService."""

from uuid import uuid4

import pytest

from life.domain.service import PrivateProfileService
from life.domain.value import IdentityId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPrivateProfileService:
    """Tests for the private profile upsert."""

    @pytest.mark.asyncio
    async def test_missing_profile_is_none(self, unit_env):
        """No private profile until one is written."""
        service = await unit_env.get(PrivateProfileService)

        assert await service.get(IdentityId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_create_then_update_keeps_identity(self, unit_env):
        """A second write replaces fields but keeps id and creation time."""
        service = await unit_env.get(PrivateProfileService)
        user_id = IdentityId(uuid4())

        created = await service.create_or_update(
            user_id, values=["honesty"], joys=["swimming"], remembered_as="Kind"
        )
        updated = await service.create_or_update(
            user_id, values=["courage"], joys=[], remembered_as="Brave"
        )

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.values == ["courage"]
        assert updated.remembered_as == "Brave"
        assert (await service.get(user_id)).joys == []
