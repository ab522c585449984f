"""Journal entry repository interface."""

from abc import ABC, abstractmethod

from life.domain.model import JournalEntry
from life.domain.value import IdentityId, JournalEntryId


class JournalEntryRepository(ABC):
    """Repository for JournalEntry entity, scoped to the calling identity."""

    @abstractmethod
    async def find_all(self, user_id: IdentityId) -> list[JournalEntry]:
        """List an identity's journal entries, newest first."""
        pass

    @abstractmethod
    async def find_by_id(
        self, user_id: IdentityId, entry_id: JournalEntryId
    ) -> JournalEntry | None:
        """Find one of an identity's entries. None if missing or not owned."""
        pass

    @abstractmethod
    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save an entry (create or update) owned by `entry.user_id`."""
        pass

    @abstractmethod
    async def delete(self, user_id: IdentityId, entry_id: JournalEntryId) -> bool:
        """Delete one of an identity's entries. True if a row was deleted."""
        pass
