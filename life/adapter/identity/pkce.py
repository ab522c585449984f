"""PKCE helpers for the credential store's OAuth and magic-link flows.

The verifier stays with us (in an HTTP-only cookie between redirects); only
its S256 challenge is sent when a flow starts.
"""

import secrets
from base64 import urlsafe_b64encode
from hashlib import sha256

# The credential store expects the lower-case method name
CODE_CHALLENGE_METHOD = "s256"

# 64 random bytes encode to 86 characters, inside the 43-128 range
VERIFIER_BYTES = 64


def _b64url(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def code_challenge_for(verifier: str) -> str:
    """S256 challenge of a verifier."""
    return _b64url(sha256(verifier.encode("ascii")).digest())


def generate_pkce_pair() -> tuple[str, str]:
    """Create a fresh verifier and its challenge.

    Returns:
        (verifier, challenge), both unpadded base64url
    """
    verifier = _b64url(secrets.token_bytes(VERIFIER_BYTES))
    return verifier, code_challenge_for(verifier)
