"""Validate invite code use case."""

from pydantic import BaseModel

from life.domain.service import InviteCodeService


class ValidateInviteCodeRequest(BaseModel):
    """Validate invite code request."""

    code: str


class ValidateInviteCodeResponse(BaseModel):
    """Validate invite code response."""

    valid: bool
    error: str | None = None


class ValidateInviteCodeUseCase:
    """Use case for checking an invite code before sign-up.

    Read-only: validating a code never consumes a use.
    """

    def __init__(self, invite_code_service: InviteCodeService) -> None:
        """Initialize validate invite code use case.

        Args:
            invite_code_service: Invite code domain service
        """
        self.invite_code_service = invite_code_service

    async def execute(
        self, request: ValidateInviteCodeRequest
    ) -> ValidateInviteCodeResponse:
        """Validate an invite code.

        Args:
            request: Validation request with the code as typed

        Returns:
            Validation response with the reason on failure
        """
        validation = await self.invite_code_service.validate(request.code)
        return ValidateInviteCodeResponse(valid=validation.valid, error=validation.error)
