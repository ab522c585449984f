"""Private profile repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import PrivateProfile
from life.domain.value import IdentityId


class PrivateProfileRepository(ABC):
    """Repository for PrivateProfile entity (one per identity)."""

    @abstractmethod
    async def find_by_user(self, user_id: IdentityId) -> PrivateProfile | None:
        """Find the identity's private profile.

        Args:
            user_id: Owning identity

        Returns:
            The private profile if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, private_profile: PrivateProfile) -> PrivateProfile:
        """Create or replace the private profile of `private_profile.user_id`.

        Args:
            private_profile: Desired state

        Returns:
            The stored private profile
        """
        pass
