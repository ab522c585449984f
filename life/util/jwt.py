"""Access token encoding and verification.

The credential store signs access tokens with a secret shared with this
API. Production code only verifies them; `create_token` exists for the mock
credential store and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from life.config import AuthSettings

# `role` claim the store puts on every signed-in (incl. anonymous) user
AUTHENTICATED_ROLE = "authenticated"


class TokenPayload(BaseModel):
    """Claims read from an access token."""

    sub: str
    email: str | None = None
    is_anonymous: bool = False
    exp: datetime


class JWTError(Exception):
    """Token is malformed, forged, expired or for another audience."""


def create_token(
    identity_id: str,
    email: str | None,
    is_anonymous: bool,
    settings: AuthSettings,
) -> str:
    """Sign a token shaped like the store's own.

    Args:
        identity_id: Becomes the `sub` claim
        email: Email claim, None for anonymous identities
        is_anonymous: Anonymous sign-in flag
        settings: Secret, algorithm, audience and lifetime

    Returns:
        Encoded token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": identity_id,
        "email": email,
        "is_anonymous": is_anonymous,
        "role": AUTHENTICATED_ROLE,
        "aud": settings.jwt_audience,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.jwt_expiry_seconds),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature, audience and expiry, then parse the claims.

    Raises:
        JWTError: If any check fails or a required claim is missing
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Invalid token") from e
