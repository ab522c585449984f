"""In-memory private profile repository for testing."""

from life.domain.model.private_profile import PrivateProfile
from life.domain.repository.private_profile import PrivateProfileRepository
from life.domain.value import IdentityId


class InMemoryPrivateProfileRepository(PrivateProfileRepository):
    """In-memory implementation of PrivateProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[IdentityId, PrivateProfile] = {}

    async def find_by_user(self, user_id: IdentityId) -> PrivateProfile | None:
        """Find the identity's private profile."""
        return self._profiles.get(user_id)

    async def upsert(self, private_profile: PrivateProfile) -> PrivateProfile:
        """Insert or replace the identity's private profile."""
        existing = self._profiles.get(private_profile.user_id)
        if existing:
            private_profile = private_profile.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._profiles[private_profile.user_id] = private_profile
        return private_profile
