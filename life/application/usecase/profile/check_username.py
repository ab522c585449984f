"""Check username availability use case."""

from pydantic import BaseModel

from life.domain.error import NotFoundError
from life.domain.service import ProfileService
from life.domain.value import IdentityId


class CheckUsernameRequest(BaseModel):
    """Check username request."""

    username: str
    identity_id: IdentityId | None = None  # Caller, when signed in


class CheckUsernameResponse(BaseModel):
    """Check username response."""

    available: bool


class CheckUsernameUseCase:
    """Use case for the live username availability check."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize check username use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CheckUsernameRequest) -> CheckUsernameResponse:
        """Report whether the username can be claimed by the caller.

        The caller's own current username counts as available.
        """
        current_username = None
        if request.identity_id:
            try:
                profile = await self.profile_service.get_profile(request.identity_id)
            except NotFoundError:
                profile = None
            if profile and profile.username:
                current_username = profile.username.root

        available = await self.profile_service.check_username_available(
            request.username, current_username
        )
        return CheckUsernameResponse(available=available)
