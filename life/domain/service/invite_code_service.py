"""Invite code domain service.

Validation is read-only and returns a value; redemption is a best-effort
side effect of a completed sign-in. Neither raises to its caller.
"""

from dataclasses import dataclass

import logfire

from life.domain.model.common import utc_now
from life.domain.model.invite_code import INVALID_INVITE_CODE
from life.domain.repository import InviteCodeRepository
from life.domain.value import IdentityId, InviteCodeValue

from .base import Service


@dataclass(frozen=True)
class InviteCodeValidation:
    """Outcome of checking an invite code."""

    valid: bool
    error: str | None = None


class InviteCodeService(Service):
    """Domain service for invite code validation and redemption."""

    def __init__(self, invite_code_repository: InviteCodeRepository) -> None:
        """Initialize invite code service.

        Args:
            invite_code_repository: Invite code repository
        """
        self.invite_code_repository = invite_code_repository

    async def validate(self, raw_code: str) -> InviteCodeValidation:
        """Check whether a code can currently be redeemed.

        The code is canonicalized (trimmed, upper-cased) before lookup, so
        case and whitespace variants validate identically.

        Args:
            raw_code: Code as typed by the user

        Returns:
            Validation result carrying the user-facing reason on failure
        """
        with logfire.span("invite_code_service.validate"):
            try:
                code = InviteCodeValue(raw_code)
            except ValueError:
                logfire.info("Malformed invite code rejected")
                return InviteCodeValidation(valid=False, error=INVALID_INVITE_CODE)

            try:
                invite_code = await self.invite_code_repository.find_active_by_code(
                    code
                )
            except Exception as e:
                logfire.error(
                    "Invite code lookup failed", code=code.root, error=str(e)
                )
                return InviteCodeValidation(valid=False, error=INVALID_INVITE_CODE)

            if not invite_code:
                logfire.info("Invite code not found", code=code.root)
                return InviteCodeValidation(valid=False, error=INVALID_INVITE_CODE)

            reason = invite_code.rejection_reason(utc_now())
            if reason:
                logfire.info("Invite code rejected", code=code.root, reason=reason)
                return InviteCodeValidation(valid=False, error=reason)

            logfire.info(
                "Invite code valid",
                code=code.root,
                current_uses=invite_code.current_uses,
                max_uses=invite_code.max_uses,
            )
            return InviteCodeValidation(valid=True)

    async def redeem(self, raw_code: str, identity_id: IdentityId) -> None:
        """Consume one use of an invite code for a freshly signed-in identity.

        Must only be called after a session has been established. Failures
        are logged and swallowed: the identity is already authenticated and
        sign-in is never rolled back over this bookkeeping. Calling twice for
        the same identity consumes two uses.

        Args:
            raw_code: Code as presented during sign-up
            identity_id: Identity that presented the code
        """
        with logfire.span(
            "invite_code_service.redeem", identity_id=str(identity_id)
        ):
            try:
                code = InviteCodeValue(raw_code)
                redeemed = await self.invite_code_repository.redeem(code)
            except Exception as e:
                logfire.error(
                    "Invite code redemption failed",
                    identity_id=str(identity_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return

            if redeemed:
                logfire.info(
                    "Invite code redeemed",
                    code=code.root,
                    identity_id=str(identity_id),
                )
            else:
                logfire.warn(
                    "Invite code not redeemable at redemption time",
                    code=code.root,
                    identity_id=str(identity_id),
                )
