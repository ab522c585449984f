"""In-memory profile repository for testing."""

from sqlalchemy.exc import IntegrityError

from life.domain.model.common import utc_now
from life.domain.model.profile import Preferences, Profile
from life.domain.repository.profile import ProfileRepository
from life.domain.value import IdentityId, Username


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Deleting a profile does not cascade to the other in-memory stores.
    """

    def __init__(self) -> None:
        self._profiles: dict[IdentityId, Profile] = {}

    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find the profile owned by an identity."""
        return self._profiles.get(identity_id)

    async def save(self, profile: Profile) -> Profile:
        """Save or update a profile.

        Raises:
            IntegrityError: If the username is held by another profile
        """
        if profile.username:
            self._check_username_free(profile.id, profile.username.root)
        self._profiles[profile.id] = profile
        return profile

    async def username_exists(self, username: str) -> bool:
        """Check whether any profile holds a username, ignoring case."""
        return any(
            p.username and p.username.root.lower() == username.lower()
            for p in self._profiles.values()
        )

    async def update_username(
        self, identity_id: IdentityId, username: Username
    ) -> Profile | None:
        """Set the username on an identity's profile.

        Raises:
            IntegrityError: If the username is held by another profile
        """
        profile = self._profiles.get(identity_id)
        if not profile:
            return None
        self._check_username_free(identity_id, username.root)
        updated = profile.model_copy(
            update={"username": username, "updated_at": utc_now()}
        )
        self._profiles[identity_id] = updated
        return updated

    async def update_preferences(
        self, identity_id: IdentityId, preferences: Preferences
    ) -> Profile | None:
        """Replace an identity's preference set."""
        profile = self._profiles.get(identity_id)
        if not profile:
            return None
        updated = profile.model_copy(
            update={"preferences": preferences, "updated_at": utc_now()}
        )
        self._profiles[identity_id] = updated
        return updated

    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile."""
        return self._profiles.pop(identity_id, None) is not None

    def _check_username_free(self, identity_id: IdentityId, username: str) -> None:
        for other in self._profiles.values():
            if (
                other.id != identity_id
                and other.username
                and other.username.root.lower() == username.lower()
            ):
                raise IntegrityError("Duplicate username", None, Exception())
