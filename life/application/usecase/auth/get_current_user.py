"""Resolve the session cookie to the caller's profile."""

from pydantic import BaseModel

from life.domain.model import Profile
from life.domain.service import JWTService, ProfileService


class GetCurrentUserRequest(BaseModel):
    token: str  # Value of the auth_token cookie


class GetCurrentUserResponse(BaseModel):
    profile: Profile


class GetCurrentUserUseCase:
    """Load the profile behind a session token.

    The first authenticated request from a new identity creates its profile
    row, so sign-in never has to.
    """

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token, then fetch or create the profile.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        identity = self.jwt_service.identity_from_token(request.token)
        return GetCurrentUserResponse(
            profile=await self.profile_service.ensure_profile(identity)
        )
