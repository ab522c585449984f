"""Update preferences use case."""

from typing import Any

from pydantic import BaseModel

from life.domain.model import Profile
from life.domain.service import ProfileService
from life.domain.value import IdentityId


class UpdatePreferencesRequest(BaseModel):
    """Update preferences request."""

    identity_id: IdentityId  # From authenticated user
    changes: dict[str, Any]


class UpdatePreferencesResponse(BaseModel):
    """Update preferences response."""

    profile: Profile


class UpdatePreferencesUseCase:
    """Use case for merging preference changes into a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update preferences use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(
        self, request: UpdatePreferencesRequest
    ) -> UpdatePreferencesResponse:
        """Merge the changes.

        Raises:
            NotFoundError: If the caller has no profile
            ValidationError: If a change names an unknown field or bad value
        """
        profile = await self.profile_service.update_preferences(
            request.identity_id, request.changes
        )
        return UpdatePreferencesResponse(profile=profile)
