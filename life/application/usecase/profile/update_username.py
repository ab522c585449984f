"""Update username use case."""

from pydantic import BaseModel

from life.domain.service import ProfileService
from life.domain.value import IdentityId


class UpdateUsernameRequest(BaseModel):
    """Update username request."""

    identity_id: IdentityId  # From authenticated user
    username: str


class UpdateUsernameResponse(BaseModel):
    """Update username response."""

    success: bool
    error: str | None = None


class UpdateUsernameUseCase:
    """Use case for claiming a username."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update username use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateUsernameRequest) -> UpdateUsernameResponse:
        """Claim the username; failures come back as user-facing messages."""
        result = await self.profile_service.update_username(
            request.identity_id, request.username
        )
        return UpdateUsernameResponse(success=result.success, error=result.error)
