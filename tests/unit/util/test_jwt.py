"""Unit tests for JWT utilities."""

from uuid import uuid4

import jwt as pyjwt
import pytest

from life.config import AuthSettings
from life.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestJwt:
    """Tests for token creation and verification."""

    def test_round_trip_claims(self):
        """A created token verifies and keeps its claims."""
        identity_id = str(uuid4())

        token = create_token(identity_id, "ada@example.com", False, SETTINGS)
        payload = verify_token(token, SETTINGS)

        assert payload.sub == identity_id
        assert payload.email == "ada@example.com"
        assert payload.is_anonymous is False

    def test_wrong_secret(self):
        """Tokens signed with another secret are rejected."""
        token = create_token(str(uuid4()), None, True, AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_wrong_audience(self):
        """Tokens for another audience are rejected."""
        token = pyjwt.encode(
            {"sub": str(uuid4()), "aud": "anon", "exp": 4102444800},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)

    def test_expired(self):
        """Expired tokens are rejected with a distinct message."""
        token = create_token(
            str(uuid4()), None, False, AuthSettings(jwt_secret="test-secret", jwt_expiry_seconds=-10)
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_missing_subject(self):
        """Tokens without a subject are rejected."""
        token = pyjwt.encode(
            {"aud": "authenticated", "exp": 4102444800},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)
