"""Hosted credential store client.

Talks to a GoTrue-compatible auth REST API that owns identities and
sessions. Sign-ins that leave the site (OAuth, magic links) use PKCE: the
verifier is handed back to the caller to keep in a cookie until the
callback exchanges the code.
"""

from typing import Any
from urllib.parse import urlencode
from uuid import NAMESPACE_URL, UUID, uuid4, uuid5

import httpx
import logfire

from life.adapter.error import CredentialStoreError, CredentialStoreFault
from life.adapter.identity.pkce import CODE_CHALLENGE_METHOD, generate_pkce_pair
from life.config import AuthSettings, CredentialStoreSettings
from life.domain.model import AuthorizationRequest, AuthSession, Identity, SignUpResult
from life.domain.service.auth_service import CredentialStore
from life.domain.value import IdentityId
from life.util.jwt import create_token


class CredentialStoreClient(CredentialStore):
    """Base class for credential store clients.

    Provides type distinction for dependency injection.
    """

    pass


class HostedCredentialStoreClient(CredentialStoreClient):
    """Credential store client backed by the hosted auth REST API."""

    def __init__(
        self, http_client: httpx.AsyncClient, settings: CredentialStoreSettings
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Shared HTTP client; its timeout bounds every call
            settings: Credential store URL and API key
        """
        self.http_client = http_client
        self.base_url = f"{settings.url.rstrip('/')}/auth/v1"
        self.anon_key = settings.anon_key

    async def initiate_authorization(
        self, provider: str, redirect_to: str
    ) -> AuthorizationRequest:
        """Build the provider authorization URL for a PKCE flow.

        No request is made; the user agent follows the URL.
        """
        code_verifier, code_challenge = generate_pkce_pair()
        params = {
            "provider": provider,
            "redirect_to": redirect_to,
            "code_challenge": code_challenge,
            "code_challenge_method": CODE_CHALLENGE_METHOD,
        }
        url = f"{self.base_url}/authorize?{urlencode(params)}"

        logfire.info("Authorization URL built", provider=provider)
        return AuthorizationRequest(url=url, code_verifier=code_verifier)

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None
    ) -> AuthSession:
        """Exchange a PKCE authorization code for a session.

        Raises:
            CredentialStoreError: If the verifier is missing or the store
                rejects the code
        """
        if not code_verifier:
            raise CredentialStoreError(
                "Invalid request: both auth code and code verifier should be non-empty"
            )

        data = await self._post(
            "/token",
            params={"grant_type": "pkce"},
            json={"auth_code": code, "code_verifier": code_verifier},
        )
        return _parse_session(data)

    async def sign_up(
        self, email: str, password: str, redirect_to: str
    ) -> SignUpResult:
        """Create an email/password identity.

        The store returns a full session when email confirmation is
        disabled, and only the user otherwise.
        """
        data = await self._post(
            "/signup",
            params={"redirect_to": redirect_to},
            json={"email": email, "password": password},
        )

        if data.get("access_token"):
            session = _parse_session(data)
            if not session.identity:
                raise CredentialStoreFault("No user in sign-up response")
            return SignUpResult(identity=session.identity, session=session)

        return SignUpResult(identity=_parse_identity(data.get("user") or data))

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        data = await self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        return _parse_session(data)

    async def send_magic_link(self, email: str, redirect_to: str) -> str:
        """Email a one-time sign-in link bound to a fresh PKCE challenge."""
        code_verifier, code_challenge = generate_pkce_pair()
        await self._post(
            "/otp",
            params={"redirect_to": redirect_to},
            json={
                "email": email,
                "create_user": True,
                "code_challenge": code_challenge,
                "code_challenge_method": CODE_CHALLENGE_METHOD,
            },
        )
        return code_verifier

    async def sign_in_anonymously(self) -> AuthSession:
        """Create an anonymous identity and session."""
        data = await self._post("/signup", json={})
        return _parse_session(data)

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        await self._post("/logout", access_token=access_token)

    async def _post(
        self,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        access_token: str | None = None,
    ) -> dict[str, Any]:
        """POST to the store and return the decoded body.

        Raises:
            CredentialStoreError: On non-2xx responses
            CredentialStoreFault: On timeouts, transport errors and
                undecodable bodies
        """
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token or self.anon_key}",
        }

        try:
            response = await self.http_client.post(
                f"{self.base_url}{path}", params=params, json=json, headers=headers
            )
        except httpx.TimeoutException as e:
            logfire.error("Credential store request timed out", path=path, error=str(e))
            raise CredentialStoreFault("Authentication service timed out") from e
        except httpx.HTTPError as e:
            logfire.error("Credential store HTTP error", path=path, error=str(e))
            raise CredentialStoreFault("Authentication service unavailable") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logfire.warn(
                "Credential store rejected request",
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise CredentialStoreError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            logfire.error("Credential store sent a non-JSON body", path=path)
            raise CredentialStoreFault("Unexpected response from authentication service") from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = {}

    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Authentication failed ({response.status_code})"


def _parse_identity(user: dict[str, Any]) -> Identity:
    try:
        return Identity(
            id=IdentityId(UUID(str(user["id"]))),
            email=user.get("email") or None,
            is_anonymous=user.get("is_anonymous", False),
            created_at=user.get("created_at"),
        )
    except (KeyError, ValueError) as e:
        logfire.error("Credential store sent a malformed user", error=str(e))
        raise CredentialStoreFault(
            "Unexpected response from authentication service"
        ) from e


def _parse_session(data: dict[str, Any]) -> AuthSession:
    if not data.get("access_token"):
        raise CredentialStoreFault("No session in response")

    user = data.get("user")
    return AuthSession(
        access_token=data["access_token"],
        refresh_token=data.get("refresh_token"),
        expires_in=data.get("expires_in"),
        identity=_parse_identity(user) if user else None,
    )


class MockCredentialStoreClient(CredentialStoreClient):
    """Mock credential store for testing.

    Issues real signed tokens so the API's token verification runs
    unchanged. OAuth codes map deterministically to identities; codes
    starting with "invalid" are rejected.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings
        self._passwords: dict[str, str] = {}
        self.signed_out: list[str] = []

    async def initiate_authorization(
        self, provider: str, redirect_to: str
    ) -> AuthorizationRequest:
        """Return a mock authorization URL."""
        code_verifier, code_challenge = generate_pkce_pair()
        params = urlencode(
            {
                "provider": provider,
                "redirect_to": redirect_to,
                "code_challenge": code_challenge,
                "mock": "true",
            }
        )
        return AuthorizationRequest(
            url=f"https://auth.example.com/authorize?{params}",
            code_verifier=code_verifier,
        )

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None
    ) -> AuthSession:
        """Exchange a mock code; the identity is derived from the code."""
        if code.startswith("invalid"):
            raise CredentialStoreError("Invalid authorization code")

        identity = Identity(
            id=IdentityId(uuid5(NAMESPACE_URL, f"oauth:{code}")),
            email=f"{code}@example.com",
        )
        return self._session(identity)

    async def sign_up(
        self, email: str, password: str, redirect_to: str
    ) -> SignUpResult:
        """Register an email/password pair and sign it in immediately."""
        if email in self._passwords:
            raise CredentialStoreError("User already registered")

        self._passwords[email] = password
        session = self._session(self._identity_for(email))
        return SignUpResult(identity=session.identity, session=session)

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Check a registered email/password pair."""
        if self._passwords.get(email) != password:
            raise CredentialStoreError("Invalid login credentials")
        return self._session(self._identity_for(email))

    async def send_magic_link(self, email: str, redirect_to: str) -> str:
        """Pretend to send a magic link."""
        code_verifier, _ = generate_pkce_pair()
        return code_verifier

    async def sign_in_anonymously(self) -> AuthSession:
        """Create a fresh anonymous identity."""
        return self._session(Identity(id=IdentityId(uuid4()), is_anonymous=True))

    async def sign_out(self, access_token: str) -> None:
        """Record the revoked token."""
        self.signed_out.append(access_token)

    def _identity_for(self, email: str) -> Identity:
        return Identity(id=IdentityId(uuid5(NAMESPACE_URL, f"email:{email}")), email=email)

    def _session(self, identity: Identity) -> AuthSession:
        token = create_token(
            str(identity.id), identity.email, identity.is_anonymous, self.auth_settings
        )
        return AuthSession(
            access_token=token,
            refresh_token=f"refresh-{identity.id}",
            expires_in=self.auth_settings.jwt_expiry_seconds,
            identity=identity,
        )
