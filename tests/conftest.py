"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from life.domain.model import InviteCode
from life.domain.value import InviteCodeId, InviteCodeValue

# Spans and events are recorded locally only
logfire.configure(send_to_logfire=False, console=False)


def make_invite_code(
    code: str = "ABC123",
    is_active: bool = True,
    expires_at: datetime | None = None,
    max_uses: int | None = None,
    current_uses: int = 0,
) -> InviteCode:
    """Helper to build invite codes for tests.

    Args:
        code: Code as typed (canonicalized by the value object)
        is_active: Whether the code is enabled
        expires_at: Optional expiry
        max_uses: Optional use cap (None = unlimited)
        current_uses: Uses already consumed

    Returns:
        InviteCode entity
    """
    return InviteCode(
        id=InviteCodeId(uuid4()),
        code=InviteCodeValue(code),
        is_active=is_active,
        expires_at=expires_at,
        max_uses=max_uses,
        current_uses=current_uses,
    )
