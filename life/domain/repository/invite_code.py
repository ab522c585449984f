"""Invite code repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import InviteCode
from life.domain.value import InviteCodeValue


class InviteCodeRepository(ABC):
    """Repository for InviteCode entity.

    Defines the contract for invite code persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_active_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        """Find an active invite code by its canonical value.

        Args:
            code: Canonical invite code

        Returns:
            The invite code if it exists and is active, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save an invite code (create or update).

        Used for out-of-band provisioning; redemption never goes through here.

        Args:
            invite_code: The invite code to save

        Returns:
            The saved invite code

        Raises:
            IntegrityError: If another invite code already uses the same code
        """
        pass

    @abstractmethod
    async def redeem(self, code: InviteCodeValue) -> bool:
        """Atomically consume one use of an invite code.

        The redeemability guard and the increment happen as one operation in
        the store, so concurrent redemptions can never push `current_uses`
        past `max_uses`.

        Args:
            code: Canonical invite code

        Returns:
            True if a use was consumed, False if the code is missing,
            inactive, expired or exhausted
        """
        pass
