"""Unit tests for the hosted credential store client."""

import json
from urllib.parse import parse_qs, urlparse
from uuid import uuid4

import httpx
import pytest

from life.adapter.error import CredentialStoreError, CredentialStoreFault
from life.adapter.identity import HostedCredentialStoreClient
from life.adapter.identity.pkce import code_challenge_for
from life.config import CredentialStoreSettings

SETTINGS = CredentialStoreSettings(url="https://store.example.com/", anon_key="anon-key")


def _client(handler) -> HostedCredentialStoreClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HostedCredentialStoreClient(http_client=http_client, settings=SETTINGS)


def _session_body(user_id: str, email: str = "ada@example.com") -> dict:
    return {
        "access_token": "access-1",
        "refresh_token": "refresh-1",
        "expires_in": 3600,
        "user": {"id": user_id, "email": email},
    }


class TestAuthorization:
    """Tests for building the authorization URL."""

    @pytest.mark.asyncio
    async def test_authorize_url_carries_pkce_challenge(self):
        """The URL names the provider, callback and S256 challenge."""
        client = _client(lambda request: httpx.Response(500))

        result = await client.initiate_authorization(
            "google", "https://api.example.com/auth/callback?invite=ABC123"
        )

        url = urlparse(result.url)
        params = parse_qs(url.query)
        assert url.netloc == "store.example.com"
        assert url.path == "/auth/v1/authorize"
        assert params["provider"] == ["google"]
        assert params["redirect_to"] == ["https://api.example.com/auth/callback?invite=ABC123"]
        assert params["code_challenge"] == [code_challenge_for(result.code_verifier)]
        assert params["code_challenge_method"] == ["s256"]


class TestCodeExchange:
    """Tests for the PKCE code exchange."""

    @pytest.mark.asyncio
    async def test_exchange_success(self):
        """A 200 response becomes a session with the identity."""
        user_id = str(uuid4())
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_session_body(user_id))

        client = _client(handler)

        session = await client.exchange_code_for_session("code-1", "verifier-1")

        assert session.access_token == "access-1"
        assert str(session.identity.id) == user_id
        assert seen["url"].path == "/auth/v1/token"
        assert seen["url"].params["grant_type"] == "pkce"
        assert seen["headers"]["apikey"] == "anon-key"
        assert seen["body"] == {"auth_code": "code-1", "code_verifier": "verifier-1"}

    @pytest.mark.asyncio
    async def test_exchange_without_verifier(self):
        """The exchange is refused locally without a verifier."""
        client = _client(lambda request: httpx.Response(200, json={}))

        with pytest.raises(CredentialStoreError):
            await client.exchange_code_for_session("code-1", None)

    @pytest.mark.asyncio
    async def test_store_error_message_surfaces(self):
        """The store's error description becomes the exception message."""
        client = _client(
            lambda request: httpx.Response(
                400,
                json={"error": "invalid_grant", "error_description": "Code expired"},
            )
        )

        with pytest.raises(CredentialStoreError, match="Code expired"):
            await client.exchange_code_for_session("code-1", "verifier-1")

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Timeouts surface as a readable error, not a hang."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(handler)

        with pytest.raises(CredentialStoreFault, match="timed out"):
            await client.exchange_code_for_session("code-1", "verifier-1")

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Connection failures surface as unavailable."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = _client(handler)

        with pytest.raises(CredentialStoreFault, match="unavailable"):
            await client.exchange_code_for_session("code-1", "verifier-1")

    @pytest.mark.asyncio
    async def test_response_without_token(self):
        """A 200 without an access token is not a session."""
        client = _client(lambda request: httpx.Response(200, json={"user": {}}))

        with pytest.raises(CredentialStoreError, match="No session"):
            await client.exchange_code_for_session("code-1", "verifier-1")

    @pytest.mark.asyncio
    async def test_malformed_user_is_a_fault(self):
        """An unparseable user id is reported without the parser detail."""
        client = _client(
            lambda request: httpx.Response(
                200, json={"access_token": "a", "user": {"id": "nope"}}
            )
        )

        with pytest.raises(CredentialStoreFault) as exc_info:
            await client.exchange_code_for_session("code-1", "verifier-1")

        assert "hexadecimal" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_rejection_keeps_status(self):
        """Store rejections are not faults and carry the HTTP status."""
        client = _client(
            lambda request: httpx.Response(400, json={"msg": "Code expired"})
        )

        with pytest.raises(CredentialStoreError) as exc_info:
            await client.exchange_code_for_session("code-1", "verifier-1")

        assert not isinstance(exc_info.value, CredentialStoreFault)
        assert exc_info.value.status_code == 400


class TestEmailFlows:
    """Tests for sign-up, password sign-in, magic links and sign-out."""

    @pytest.mark.asyncio
    async def test_sign_up_with_confirmation(self):
        """Without a session the identity alone comes back."""
        user_id = str(uuid4())
        client = _client(
            lambda request: httpx.Response(
                200, json={"id": user_id, "email": "ada@example.com"}
            )
        )

        result = await client.sign_up("ada@example.com", "secret1", "https://cb")

        assert str(result.identity.id) == user_id
        assert result.session is None

    @pytest.mark.asyncio
    async def test_sign_up_signed_in(self):
        """With confirmation disabled the store returns a session."""
        user_id = str(uuid4())
        client = _client(lambda request: httpx.Response(200, json=_session_body(user_id)))

        result = await client.sign_up("ada@example.com", "secret1", "https://cb")

        assert result.session.access_token == "access-1"
        assert str(result.identity.id) == user_id

    @pytest.mark.asyncio
    async def test_password_sign_in_rejected(self):
        """Wrong credentials carry the store's message."""
        client = _client(
            lambda request: httpx.Response(
                400, json={"error_description": "Invalid login credentials"}
            )
        )

        with pytest.raises(CredentialStoreError, match="Invalid login credentials"):
            await client.sign_in_with_password("ada@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_magic_link_sends_challenge(self):
        """The OTP request carries the challenge of the returned verifier."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={})

        client = _client(handler)

        verifier = await client.send_magic_link("ada@example.com", "https://cb")

        assert seen["path"] == "/auth/v1/otp"
        assert seen["body"]["email"] == "ada@example.com"
        assert seen["body"]["code_challenge"] == code_challenge_for(verifier)

    @pytest.mark.asyncio
    async def test_sign_out_uses_bearer_token(self):
        """Logout authenticates with the user's access token."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["authorization"] = request.headers["authorization"]
            return httpx.Response(204)

        client = _client(handler)

        await client.sign_out("user-token")

        assert seen["authorization"] == "Bearer user-token"
