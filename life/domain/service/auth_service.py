"""Authentication domain service."""

import logfire

from life.domain.model import AuthorizationRequest, AuthSession, SignUpResult

from .base import Service


class CredentialStore:
    """Interface of the hosted credential store.

    The store owns identities and sessions. Every method raises
    AuthenticationError (or a subclass) when the store rejects the request,
    times out, or cannot be reached.
    """

    async def initiate_authorization(
        self, provider: str, redirect_to: str
    ) -> AuthorizationRequest:
        """Start an OAuth sign-in with PKCE.

        Args:
            provider: OAuth provider name (e.g. "google")
            redirect_to: Callback URL the store sends the user back to

        Returns:
            Authorization URL and the PKCE verifier to keep for the exchange
        """
        raise NotImplementedError

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None
    ) -> AuthSession:
        """Exchange an authorization code for a session.

        Args:
            code: Opaque code from the callback
            code_verifier: PKCE verifier kept since the flow started

        Returns:
            Established session
        """
        raise NotImplementedError

    async def sign_up(
        self, email: str, password: str, redirect_to: str
    ) -> SignUpResult:
        """Create an email/password identity.

        Args:
            email: Email address
            password: Password
            redirect_to: Where the confirmation email should land

        Returns:
            New identity, with a session if no confirmation is required
        """
        raise NotImplementedError

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        raise NotImplementedError

    async def send_magic_link(self, email: str, redirect_to: str) -> str:
        """Email a one-time sign-in link.

        Args:
            email: Email address
            redirect_to: Callback URL embedded in the link

        Returns:
            PKCE verifier to keep for the callback exchange
        """
        raise NotImplementedError

    async def sign_in_anonymously(self) -> AuthSession:
        """Create an anonymous identity and session."""
        raise NotImplementedError

    async def sign_out(self, access_token: str) -> None:
        """Revoke a session."""
        raise NotImplementedError


class AuthService(Service):
    """Domain service for sign-in operations against the credential store."""

    def __init__(self, credential_store: CredentialStore) -> None:
        """Initialize auth service.

        Args:
            credential_store: Hosted credential store client
        """
        self.credential_store = credential_store

    async def initiate_oauth(self, provider: str, redirect_to: str) -> AuthorizationRequest:
        """Start an OAuth sign-in.

        Args:
            provider: OAuth provider name
            redirect_to: Callback URL

        Returns:
            Authorization request (URL and PKCE verifier)
        """
        with logfire.span("auth_service.initiate_oauth", provider=provider):
            request = await self.credential_store.initiate_authorization(
                provider, redirect_to
            )
            logfire.info("OAuth sign-in initiated", provider=provider)
            return request

    async def exchange_code_for_session(
        self, code: str, code_verifier: str | None
    ) -> AuthSession:
        """Exchange a callback code for a session.

        Args:
            code: Authorization code
            code_verifier: PKCE verifier

        Returns:
            Established session

        Raises:
            AuthenticationError: If the store rejects the exchange
        """
        with logfire.span(
            "auth_service.exchange_code_for_session",
            has_verifier=code_verifier is not None,
        ):
            session = await self.credential_store.exchange_code_for_session(
                code, code_verifier
            )
            logfire.info(
                "Session established",
                identity_id=str(session.identity.id) if session.identity else None,
            )
            return session

    async def sign_up(self, email: str, password: str, redirect_to: str) -> SignUpResult:
        """Create an email/password identity.

        Raises:
            AuthenticationError: If the store rejects the sign-up
        """
        with logfire.span("auth_service.sign_up"):
            result = await self.credential_store.sign_up(email, password, redirect_to)
            logfire.info(
                "Identity signed up",
                identity_id=str(result.identity.id),
                confirmation_required=result.session is None,
            )
            return result

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password.

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        with logfire.span("auth_service.sign_in_with_password"):
            return await self.credential_store.sign_in_with_password(email, password)

    async def send_magic_link(self, email: str, redirect_to: str) -> str:
        """Email a magic link and return the PKCE verifier to keep.

        Raises:
            AuthenticationError: If the store refuses to send the link
        """
        with logfire.span("auth_service.send_magic_link"):
            verifier = await self.credential_store.send_magic_link(email, redirect_to)
            logfire.info("Magic link sent")
            return verifier

    async def sign_in_anonymously(self) -> AuthSession:
        """Create an anonymous session.

        Raises:
            AuthenticationError: If the store refuses anonymous sign-ins
        """
        with logfire.span("auth_service.sign_in_anonymously"):
            return await self.credential_store.sign_in_anonymously()

    async def sign_out(self, access_token: str) -> None:
        """Revoke a session at the store.

        Raises:
            AuthenticationError: If the store cannot be reached
        """
        with logfire.span("auth_service.sign_out"):
            await self.credential_store.sign_out(access_token)
