"""Unit tests for email sign-up and current-user resolution."""

import pytest

from life.adapter.error import CredentialStoreError
from life.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    SignUpWithEmailRequest,
    SignUpWithEmailUseCase,
)
from life.domain.repository import InviteCodeRepository, ProfileRepository
from life.domain.value import InviteCodeValue
from life.util.jwt import JWTError
from tests.conftest import make_invite_code
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignUpWithEmail:
    """Tests for SignUpWithEmailUseCase."""

    @pytest.mark.asyncio
    async def test_sign_up_redeems_invite(self, unit_env):
        """A successful sign-up with a session consumes the invite."""
        use_case = await unit_env.get(SignUpWithEmailUseCase)
        repo = await unit_env.get(InviteCodeRepository)
        await repo.save(make_invite_code("ABC123", max_uses=1))

        result = await use_case.execute(
            SignUpWithEmailRequest(
                email="ada@example.com", password="secret1", invite_code="abc123"
            )
        )

        assert result.success is True
        assert result.session is not None
        stored = await repo.find_active_by_code(InviteCodeValue("ABC123"))
        assert stored.current_uses == 1

    @pytest.mark.asyncio
    async def test_sign_up_requires_valid_invite(self, unit_env):
        """No account is created with a bad invite."""
        use_case = await unit_env.get(SignUpWithEmailUseCase)

        result = await use_case.execute(
            SignUpWithEmailRequest(
                email="ada@example.com", password="secret1", invite_code="NOPE"
            )
        )

        assert result.success is False
        assert result.error == "Invalid invite code"

    @pytest.mark.asyncio
    async def test_duplicate_sign_up_raises(self, unit_env):
        """The credential store's rejection propagates."""
        use_case = await unit_env.get(SignUpWithEmailUseCase)
        repo = await unit_env.get(InviteCodeRepository)
        await repo.save(make_invite_code("OPEN"))
        request = SignUpWithEmailRequest(
            email="ada@example.com", password="secret1", invite_code="OPEN"
        )
        await use_case.execute(request)

        with pytest.raises(CredentialStoreError, match="User already registered"):
            await use_case.execute(request)


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_profile_created_on_first_request(self, unit_env):
        """A valid token yields a profile, created lazily."""
        sign_up = await unit_env.get(SignUpWithEmailUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        invite_repo = await unit_env.get(InviteCodeRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        await invite_repo.save(make_invite_code("OPEN"))
        signed_up = await sign_up.execute(
            SignUpWithEmailRequest(
                email="ada@example.com", password="secret1", invite_code="OPEN"
            )
        )

        result = await use_case.execute(
            GetCurrentUserRequest(token=signed_up.session.access_token)
        )

        assert result.profile.email == "ada@example.com"
        assert await profile_repo.find_by_id(result.profile.id) is not None

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        """A malformed token raises JWTError."""
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))
