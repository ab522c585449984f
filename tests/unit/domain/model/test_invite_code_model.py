"""Unit tests for invite code redemption rules."""

from datetime import timedelta

from life.domain.model.common import utc_now
from tests.conftest import make_invite_code


class TestRejectionReason:
    """Tests for InviteCode.rejection_reason."""

    def test_expiring_now_is_expired(self):
        """A code is redeemable only strictly before its expiry."""
        now = utc_now()
        invite_code = make_invite_code(expires_at=now)

        assert invite_code.rejection_reason(now) == "Invite code has expired"
        assert invite_code.is_redeemable(now) is False

    def test_expiring_later_is_redeemable(self):
        """A code still inside its window has no rejection reason."""
        now = utc_now()
        invite_code = make_invite_code(expires_at=now + timedelta(seconds=1))

        assert invite_code.rejection_reason(now) is None

    def test_inactive_checked_before_expiry(self):
        """A disabled code reads as invalid even when also expired."""
        now = utc_now()
        invite_code = make_invite_code(is_active=False, expires_at=now - timedelta(days=1))

        assert invite_code.rejection_reason(now) == "Invalid invite code"
