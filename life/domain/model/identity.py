"""Identity and session models.

Identities and sessions are owned by the credential store; the service
only ever sees the shapes it hands back.
"""

from datetime import datetime

from life.domain.model.common import DomainModel
from life.domain.value import IdentityId


class Identity(DomainModel):
    """Authenticated principal issued by the credential store."""

    id: IdentityId
    email: str | None = None
    is_anonymous: bool = False
    created_at: datetime | None = None


class AuthSession(DomainModel):
    """Session returned by the credential store after a successful sign-in.

    `identity` is None when the store returned tokens without a user, which
    the callback flow treats as a failed sign-in.
    """

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    identity: Identity | None = None


class SignUpResult(DomainModel):
    """Outcome of an email/password sign-up.

    `session` is None when the store requires email confirmation first.
    """

    identity: Identity
    session: AuthSession | None = None


class AuthorizationRequest(DomainModel):
    """A started PKCE flow: where to send the user and the secret to keep."""

    url: str
    code_verifier: str
