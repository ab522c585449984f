"""Unit tests for PKCE utilities."""

import base64
import hashlib

from life.adapter.identity.pkce import code_challenge_for, generate_pkce_pair


class TestGeneratePkcePair:
    """Tests for generate_pkce_pair."""

    def test_challenge_is_s256_of_verifier(self):
        """The challenge is the unpadded base64url SHA-256 of the verifier."""
        verifier, challenge = generate_pkce_pair()

        expected = (
            base64.urlsafe_b64encode(hashlib.sha256(verifier.encode("ascii")).digest())
            .rstrip(b"=")
            .decode("ascii")
        )
        assert challenge == expected
        assert code_challenge_for(verifier) == challenge

    def test_verifier_length_and_alphabet(self):
        """Verifiers are 43-128 URL-safe characters without padding."""
        verifier, _ = generate_pkce_pair()

        assert 43 <= len(verifier) <= 128
        assert "=" not in verifier
        assert "+" not in verifier and "/" not in verifier

    def test_pairs_are_unique(self):
        """Each call produces a fresh verifier."""
        assert generate_pkce_pair()[0] != generate_pkce_pair()[0]
