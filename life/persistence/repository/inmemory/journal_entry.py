"""In-memory journal entry repository for testing."""

from life.domain.model.journal_entry import JournalEntry
from life.domain.repository.journal_entry import JournalEntryRepository
from life.domain.value import IdentityId, JournalEntryId


class InMemoryJournalEntryRepository(JournalEntryRepository):
    """In-memory implementation of JournalEntryRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[JournalEntryId, JournalEntry] = {}

    async def find_all(self, user_id: IdentityId) -> list[JournalEntry]:
        """List an identity's entries, newest first."""
        owned = [e for e in reversed(self._entries.values()) if e.user_id == user_id]
        return sorted(owned, key=lambda e: e.created_at, reverse=True)

    async def find_by_id(
        self, user_id: IdentityId, entry_id: JournalEntryId
    ) -> JournalEntry | None:
        """Find one of an identity's entries."""
        entry = self._entries.get(entry_id)
        if not entry or entry.user_id != user_id:
            return None
        return entry

    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save or update an entry."""
        existing = self._entries.get(entry.id)
        if existing and existing.user_id != entry.user_id:
            return entry
        self._entries[entry.id] = entry
        return entry

    async def delete(self, user_id: IdentityId, entry_id: JournalEntryId) -> bool:
        """Delete one of an identity's entries."""
        entry = self._entries.get(entry_id)
        if not entry or entry.user_id != user_id:
            return False
        del self._entries[entry_id]
        return True
