"""Profile repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import Preferences, Profile
from life.domain.value import IdentityId, Username


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find the profile owned by an identity.

        Args:
            identity_id: Identity ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile

        Raises:
            IntegrityError: If the username is taken (case-insensitive)
        """
        pass

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        """Check whether any profile holds a username, ignoring case.

        Args:
            username: Username to look up

        Returns:
            True if a profile already uses it
        """
        pass

    @abstractmethod
    async def update_username(
        self, identity_id: IdentityId, username: Username
    ) -> Profile | None:
        """Set the username on an identity's profile.

        Args:
            identity_id: Owning identity
            username: New username

        Returns:
            Updated profile, None if the identity has no profile

        Raises:
            IntegrityError: If the username is taken (case-insensitive)
        """
        pass

    @abstractmethod
    async def update_preferences(
        self, identity_id: IdentityId, preferences: Preferences
    ) -> Profile | None:
        """Replace an identity's preference set.

        Args:
            identity_id: Owning identity
            preferences: Full preference set to store

        Returns:
            Updated profile, None if the identity has no profile
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile. The store cascades to every owned record.

        Args:
            identity_id: Owning identity

        Returns:
            True if a profile was deleted
        """
        pass
