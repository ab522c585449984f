"""Invite code entity.

Invite codes gate account creation. They are created out of band
(migrations or admin SQL) and only ever mutated by redemption, which
increments `current_uses` through a single guarded update in the store.
"""

from datetime import datetime

from pydantic import Field, model_validator

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import InviteCodeId, InviteCodeValue

INVALID_INVITE_CODE = "Invalid invite code"
EXPIRED_INVITE_CODE = "Invite code has expired"
EXHAUSTED_INVITE_CODE = "Invite code has reached maximum uses"


class InviteCode(DomainModel):
    """Invite code entity.

    Business rules:
    - `current_uses` never exceeds `max_uses` when a cap is set
    - A missing `max_uses` means unlimited uses
    - A missing `expires_at` means the code never expires
    """

    id: InviteCodeId
    code: InviteCodeValue
    is_active: bool = True
    expires_at: datetime | None = None
    max_uses: int | None = Field(default=None, gt=0)
    current_uses: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def check_capacity(self) -> "InviteCode":
        """Reject a counter that has overrun its cap."""
        if self.max_uses is not None and self.current_uses > self.max_uses:
            raise ValueError("current_uses cannot exceed max_uses")
        return self

    def rejection_reason(self, now: datetime) -> str | None:
        """Explain why this code cannot be redeemed at `now`.

        Args:
            now: Reference time (timezone-aware)

        Returns:
            User-facing reason, or None if the code is redeemable
        """
        if not self.is_active:
            return INVALID_INVITE_CODE
        if self.expires_at is not None and self.expires_at <= now:
            return EXPIRED_INVITE_CODE
        if self.max_uses is not None and self.current_uses >= self.max_uses:
            return EXHAUSTED_INVITE_CODE
        return None

    def is_redeemable(self, now: datetime) -> bool:
        """Whether one more redemption is allowed at `now`."""
        return self.rejection_reason(now) is None
