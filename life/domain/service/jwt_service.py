"""JWT token domain service."""

from uuid import UUID

import logfire

from life.config import AuthSettings
from life.domain.model import Identity
from life.domain.value import IdentityId
from life.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for access token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, identity: Identity) -> str:
        """Create an access token for an identity.

        Args:
            identity: Identity the token is issued to

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", identity_id=str(identity.id)):
            return create_token(
                str(identity.id),
                identity.email,
                identity.is_anonymous,
                self.auth_settings,
            )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify access token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def identity_from_token(self, token: str) -> Identity:
        """Verify a token and describe the identity it was issued to.

        Args:
            token: JWT token string

        Returns:
            Identity carried by the token

        Raises:
            JWTError: If token is invalid, expired or has a malformed subject
        """
        payload = self.verify_token(token)
        try:
            identity_id = IdentityId(UUID(payload.sub))
        except ValueError:
            raise JWTError("Invalid token")
        return Identity(
            id=identity_id,
            email=payload.email,
            is_anonymous=payload.is_anonymous,
        )
