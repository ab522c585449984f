"""Unit tests for starting sign-in flows."""

from urllib.parse import parse_qs, urlparse

import pytest

from life.application.usecase.auth import (
    SendMagicLinkRequest,
    SendMagicLinkUseCase,
    StartOAuthSignInRequest,
    StartOAuthSignInUseCase,
)
from life.domain.repository import InviteCodeRepository
from tests.conftest import make_invite_code
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _redirect_to(authorization_url: str) -> str:
    return parse_qs(urlparse(authorization_url).query)["redirect_to"][0]


class TestStartOAuthSignIn:
    """Tests for StartOAuthSignInUseCase."""

    @pytest.mark.asyncio
    async def test_without_invite(self, unit_env):
        """The callback URL carries no invite when none was given."""
        use_case = await unit_env.get(StartOAuthSignInUseCase)

        result = await use_case.execute(StartOAuthSignInRequest())

        assert result.error is None
        assert result.code_verifier
        assert "provider=google" in result.authorization_url
        assert _redirect_to(result.authorization_url).endswith("/auth/callback")

    @pytest.mark.asyncio
    async def test_canonical_invite_carried_through(self, unit_env):
        """A valid invite is put on the callback URL in canonical form."""
        use_case = await unit_env.get(StartOAuthSignInUseCase)
        repo = await unit_env.get(InviteCodeRepository)
        await repo.save(make_invite_code("ABC123"))

        result = await use_case.execute(
            StartOAuthSignInRequest(provider="github", invite_code=" abc123", next="/journal")
        )

        callback = urlparse(_redirect_to(result.authorization_url))
        params = parse_qs(callback.query)
        assert "provider=github" in result.authorization_url
        assert params["invite"] == ["ABC123"]
        assert params["next"] == ["/journal"]

    @pytest.mark.asyncio
    async def test_invalid_invite_rejected_before_redirect(self, unit_env):
        """A bad invite stops the flow with its reason."""
        use_case = await unit_env.get(StartOAuthSignInUseCase)

        result = await use_case.execute(StartOAuthSignInRequest(invite_code="NOPE"))

        assert result.authorization_url is None
        assert result.error == "Invalid invite code"


class TestSendMagicLink:
    """Tests for SendMagicLinkUseCase."""

    @pytest.mark.asyncio
    async def test_send_without_invite(self, unit_env):
        """Returning users get a link without an invite."""
        use_case = await unit_env.get(SendMagicLinkUseCase)

        result = await use_case.execute(SendMagicLinkRequest(email="ada@example.com"))

        assert result.success is True
        assert result.code_verifier

    @pytest.mark.asyncio
    async def test_exhausted_invite_rejected(self, unit_env):
        """An exhausted invite is reported instead of sending."""
        use_case = await unit_env.get(SendMagicLinkUseCase)
        repo = await unit_env.get(InviteCodeRepository)
        await repo.save(make_invite_code("FULL", max_uses=1, current_uses=1))

        result = await use_case.execute(
            SendMagicLinkRequest(email="ada@example.com", invite_code="full")
        )

        assert result.success is False
        assert result.error == "Invite code has reached maximum uses"
