"""Unit tests for profile use cases."""

from uuid import uuid4

import pytest

from life.application.usecase.profile import (
    CheckUsernameRequest,
    CheckUsernameUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    UpdateUsernameRequest,
    UpdateUsernameUseCase,
)
from life.domain.error import NotFoundError
from life.domain.model import Identity
from life.domain.repository import ProfileRepository
from life.domain.service import CredentialStore, ProfileService
from life.domain.value import IdentityId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _profile(unit_env):
    profile_service = await unit_env.get(ProfileService)
    return await profile_service.ensure_profile(Identity(id=IdentityId(uuid4())))


class TestCheckUsername:
    """Tests for CheckUsernameUseCase."""

    @pytest.mark.asyncio
    async def test_signed_out_check(self, unit_env):
        """Works without a caller."""
        use_case = await unit_env.get(CheckUsernameUseCase)

        result = await use_case.execute(CheckUsernameRequest(username="ada_l"))

        assert result.available is True

    @pytest.mark.asyncio
    async def test_own_username_available(self, unit_env):
        """The caller's current username is available to them."""
        use_case = await unit_env.get(CheckUsernameUseCase)
        update = await unit_env.get(UpdateUsernameUseCase)
        owner = await _profile(unit_env)
        await update.execute(UpdateUsernameRequest(identity_id=owner.id, username="ada_l"))

        mine = await use_case.execute(
            CheckUsernameRequest(username="Ada_L", identity_id=owner.id)
        )
        someone_else = await use_case.execute(
            CheckUsernameRequest(username="Ada_L", identity_id=IdentityId(uuid4()))
        )

        assert mine.available is True
        assert someone_else.available is False


class TestUpdateUsername:
    """Tests for UpdateUsernameUseCase."""

    @pytest.mark.asyncio
    async def test_error_as_value(self, unit_env):
        """Failures are returned, not raised."""
        update = await unit_env.get(UpdateUsernameUseCase)
        owner = await _profile(unit_env)

        result = await update.execute(
            UpdateUsernameRequest(identity_id=owner.id, username="has space")
        )

        assert result.success is False
        assert result.error == "Username can only contain letters, numbers, and underscores"


class TestDeleteAccount:
    """Tests for DeleteAccountUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_profile_and_signs_out(self, unit_env):
        """The profile is removed and the session revoked."""
        use_case = await unit_env.get(DeleteAccountUseCase)
        repo = await unit_env.get(ProfileRepository)
        credential_store = await unit_env.get(CredentialStore)
        owner = await _profile(unit_env)

        result = await use_case.execute(
            DeleteAccountRequest(identity_id=owner.id, access_token="token-1")
        )

        assert result.success is True
        assert await repo.find_by_id(owner.id) is None
        assert credential_store.signed_out == ["token-1"]

    @pytest.mark.asyncio
    async def test_missing_profile(self, unit_env):
        """Deleting an unknown account raises NotFoundError."""
        use_case = await unit_env.get(DeleteAccountUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteAccountRequest(identity_id=IdentityId(uuid4()), access_token="t")
            )
