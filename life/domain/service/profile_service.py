"""Profile domain service."""

import re
from dataclasses import dataclass
from typing import Any

import logfire
from sqlalchemy.exc import IntegrityError

from life.domain.error import NotFoundError, ValidationError
from life.domain.model import Identity, Preferences, Profile
from life.domain.repository import ProfileRepository
from life.domain.value import IdentityId, Username, username_error
from life.domain.value.types import USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH

from .base import Service

USERNAME_TAKEN = "Username is already taken"
USERNAME_UPDATE_FAILED = "Failed to update username"
NOT_AUTHENTICATED = "Not authenticated"

_AVAILABLE_PATTERN = re.compile(r"^[a-z0-9_]+$")


@dataclass(frozen=True)
class UsernameUpdate:
    """Outcome of claiming a username."""

    success: bool
    error: str | None = None


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, identity_id: IdentityId) -> Profile:
        """Get an identity's profile.

        Args:
            identity_id: Identity ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If the identity has no profile
        """
        with logfire.span("profile_service.get_profile", identity_id=str(identity_id)):
            profile = await self.profile_repository.find_by_id(identity_id)
            if not profile:
                logfire.warn("Profile not found", identity_id=str(identity_id))
                raise NotFoundError("Profile", str(identity_id))
            return profile

    async def ensure_profile(self, identity: Identity) -> Profile:
        """Return the identity's profile, creating it on first access.

        Args:
            identity: Authenticated identity

        Returns:
            Existing or newly created profile
        """
        with logfire.span("profile_service.ensure_profile", identity_id=str(identity.id)):
            existing = await self.profile_repository.find_by_id(identity.id)
            if existing:
                return existing

            profile = Profile(
                id=identity.id,
                email=identity.email,
                is_anonymous=identity.is_anonymous,
            )
            try:
                saved = await self.profile_repository.save(profile)
            except IntegrityError:
                # A concurrent first request created it
                saved = await self.profile_repository.find_by_id(identity.id)
                if not saved:
                    raise
            logfire.info("Profile created", identity_id=str(identity.id))
            return saved

    async def check_username_available(
        self, username: str, current_username: str | None = None
    ) -> bool:
        """Check whether a username can be claimed.

        Args:
            username: Candidate username
            current_username: Caller's current username, which is always
                reported as available to them

        Returns:
            False for malformed or taken names (or when the lookup fails)
        """
        candidate = username.strip().lower()
        with logfire.span(
            "profile_service.check_username_available", username=candidate
        ):
            if (
                len(candidate) < USERNAME_MIN_LENGTH
                or len(candidate) > USERNAME_MAX_LENGTH
                or not _AVAILABLE_PATTERN.match(candidate)
            ):
                return False

            if current_username and candidate == current_username.lower():
                return True

            try:
                taken = await self.profile_repository.username_exists(candidate)
            except Exception as e:
                logfire.error(
                    "Username availability lookup failed",
                    username=candidate,
                    error=str(e),
                )
                return False
            return not taken

    async def update_username(
        self, identity_id: IdentityId, username: str
    ) -> UsernameUpdate:
        """Claim a username for an identity's profile.

        Args:
            identity_id: Identity claiming the name
            username: Requested username (trimmed before use)

        Returns:
            Result with a user-facing error string on failure
        """
        candidate = username.strip()
        with logfire.span(
            "profile_service.update_username",
            identity_id=str(identity_id),
            username=candidate,
        ):
            error = username_error(candidate)
            if error:
                return UsernameUpdate(success=False, error=error)

            profile = await self.profile_repository.find_by_id(identity_id)
            if not profile:
                return UsernameUpdate(success=False, error=NOT_AUTHENTICATED)

            current = profile.username.root if profile.username else None
            if not await self.check_username_available(candidate, current):
                logfire.info("Username taken", username=candidate)
                return UsernameUpdate(success=False, error=USERNAME_TAKEN)

            try:
                updated = await self.profile_repository.update_username(
                    identity_id, Username(candidate)
                )
            except IntegrityError:
                # Lost a race with another claim; the unique index decided
                logfire.warn("Username claimed concurrently", username=candidate)
                return UsernameUpdate(success=False, error=USERNAME_TAKEN)
            except Exception as e:
                logfire.error(
                    "Username update failed",
                    identity_id=str(identity_id),
                    error=str(e),
                )
                return UsernameUpdate(success=False, error=USERNAME_UPDATE_FAILED)

            if not updated:
                return UsernameUpdate(success=False, error=NOT_AUTHENTICATED)

            logfire.info(
                "Username updated", identity_id=str(identity_id), username=candidate
            )
            return UsernameUpdate(success=True)

    async def update_preferences(
        self, identity_id: IdentityId, changes: dict[str, Any]
    ) -> Profile:
        """Merge preference changes into an identity's profile.

        Args:
            identity_id: Owning identity
            changes: Subset of preference fields to change

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the identity has no profile
            ValidationError: If a change names an unknown field or bad value
        """
        with logfire.span(
            "profile_service.update_preferences",
            identity_id=str(identity_id),
            fields=sorted(changes),
        ):
            profile = await self.get_profile(identity_id)

            unknown = set(changes) - set(Preferences.model_fields)
            if unknown:
                raise ValidationError(f"Unknown preferences: {', '.join(sorted(unknown))}")

            try:
                merged = Preferences.model_validate(
                    {**profile.preferences.model_dump(), **changes}
                )
            except ValueError as e:
                raise ValidationError(str(e))

            updated = await self.profile_repository.update_preferences(
                identity_id, merged
            )
            if not updated:
                raise NotFoundError("Profile", str(identity_id))
            return updated

    async def delete_account(self, identity_id: IdentityId) -> None:
        """Delete an identity's profile and, by cascade, everything it owns.

        Args:
            identity_id: Owning identity

        Raises:
            NotFoundError: If the identity has no profile
        """
        with logfire.span("profile_service.delete_account", identity_id=str(identity_id)):
            deleted = await self.profile_repository.delete(identity_id)
            if not deleted:
                raise NotFoundError("Profile", str(identity_id))
            logfire.info("Account deleted", identity_id=str(identity_id))
