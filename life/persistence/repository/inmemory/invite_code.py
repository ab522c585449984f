"""In-memory invite code repository for testing."""

from sqlalchemy.exc import IntegrityError

from life.domain.model.common import utc_now
from life.domain.model.invite_code import InviteCode
from life.domain.repository.invite_code import InviteCodeRepository
from life.domain.value import InviteCodeId, InviteCodeValue


class InMemoryInviteCodeRepository(InviteCodeRepository):
    """In-memory implementation of InviteCodeRepository for testing."""

    def __init__(self) -> None:
        self._codes: dict[InviteCodeId, InviteCode] = {}

    async def find_active_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        """Find an active invite code by its canonical value."""
        for invite_code in self._codes.values():
            if invite_code.code == code and invite_code.is_active:
                return invite_code
        return None

    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save an invite code.

        Raises:
            IntegrityError: If another invite code uses the same code
        """
        for existing in self._codes.values():
            if existing.code == invite_code.code and existing.id != invite_code.id:
                raise IntegrityError("Duplicate invite code", None, Exception())

        self._codes[invite_code.id] = invite_code
        return invite_code

    async def redeem(self, code: InviteCodeValue) -> bool:
        """Consume one use; check and increment run without yielding."""
        for invite_code in self._codes.values():
            if invite_code.code != code:
                continue
            if not invite_code.is_redeemable(utc_now()):
                return False
            self._codes[invite_code.id] = invite_code.model_copy(
                update={"current_uses": invite_code.current_uses + 1}
            )
            return True
        return False
