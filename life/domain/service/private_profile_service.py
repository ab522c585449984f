"""Private profile domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from life.domain.model import PrivateProfile
from life.domain.model.common import utc_now
from life.domain.repository import PrivateProfileRepository
from life.domain.value import IdentityId, PrivateProfileId

from .base import Service


class PrivateProfileService(Service):
    """Domain service for the identity's private profile."""

    def __init__(self, private_profile_repository: PrivateProfileRepository) -> None:
        """Initialize private profile service.

        Args:
            private_profile_repository: Private profile repository
        """
        self.private_profile_repository = private_profile_repository

    async def get(self, user_id: IdentityId) -> PrivateProfile | None:
        """Get the identity's private profile, if one was ever written."""
        with logfire.span("private_profile_service.get", user_id=str(user_id)):
            return await self.private_profile_repository.find_by_user(user_id)

    async def create_or_update(
        self,
        user_id: IdentityId,
        values: list[str],
        joys: list[str],
        remembered_as: str,
        share_code: str | None = None,
        share_expiry: datetime | None = None,
    ) -> PrivateProfile:
        """Write the identity's private profile, creating it if needed.

        Args:
            user_id: Calling identity
            values: Personal values
            joys: Things that bring joy
            remembered_as: How the identity wants to be remembered
            share_code: Optional code for sharing the profile
            share_expiry: When the share code stops working

        Returns:
            Stored private profile
        """
        with logfire.span("private_profile_service.create_or_update", user_id=str(user_id)):
            existing = await self.private_profile_repository.find_by_user(user_id)
            private_profile = PrivateProfile(
                id=existing.id if existing else PrivateProfileId(uuid4()),
                user_id=user_id,
                values=values,
                joys=joys,
                remembered_as=remembered_as,
                share_code=share_code,
                share_expiry=share_expiry,
                created_at=existing.created_at if existing else utc_now(),
                updated_at=utc_now(),
            )
            saved = await self.private_profile_repository.upsert(private_profile)
            logfire.info(
                "Private profile saved", user_id=str(user_id), created=existing is None
            )
            return saved
