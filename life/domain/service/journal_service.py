"""Journal domain service."""

from typing import Any
from uuid import uuid4

import logfire

from life.domain.error import NotFoundError
from life.domain.model import JournalEntry
from life.domain.repository import JournalEntryRepository
from life.domain.value import IdentityId, JournalEntryId, LifePhaseId, Mood

from .base import Service, apply_changes

UPDATABLE_FIELDS = frozenset({"title", "content", "mood", "life_phase_id"})


class JournalService(Service):
    """Domain service for journal entries, scoped to the calling identity."""

    def __init__(self, journal_entry_repository: JournalEntryRepository) -> None:
        """Initialize journal service.

        Args:
            journal_entry_repository: Journal entry repository
        """
        self.journal_entry_repository = journal_entry_repository

    async def get_all(self, user_id: IdentityId) -> list[JournalEntry]:
        """List the identity's entries, newest first."""
        with logfire.span("journal_service.get_all", user_id=str(user_id)):
            return await self.journal_entry_repository.find_all(user_id)

    async def get(self, user_id: IdentityId, entry_id: JournalEntryId) -> JournalEntry:
        """Get one entry.

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span("journal_service.get", entry_id=str(entry_id)):
            entry = await self.journal_entry_repository.find_by_id(user_id, entry_id)
            if not entry:
                logfire.warn("Journal entry not found", entry_id=str(entry_id))
                raise NotFoundError("JournalEntry", str(entry_id))
            return entry

    async def create(
        self,
        user_id: IdentityId,
        content: str,
        title: str | None = None,
        mood: Mood | None = None,
        life_phase_id: LifePhaseId | None = None,
    ) -> JournalEntry:
        """Write a new journal entry.

        Args:
            user_id: Calling identity
            content: Entry text
            title: Optional title
            mood: Optional mood tag
            life_phase_id: Optional phase the entry belongs to

        Returns:
            Created entry
        """
        with logfire.span("journal_service.create", user_id=str(user_id)):
            entry = JournalEntry(
                id=JournalEntryId(uuid4()),
                user_id=user_id,
                title=title,
                content=content,
                mood=mood,
                life_phase_id=life_phase_id,
            )
            saved = await self.journal_entry_repository.save(entry)
            logfire.info("Journal entry created", entry_id=str(saved.id))
            return saved

    async def update(
        self, user_id: IdentityId, entry_id: JournalEntryId, changes: dict[str, Any]
    ) -> JournalEntry:
        """Apply a partial update to an entry.

        Raises:
            NotFoundError: If missing or owned by another identity
            ValidationError: If a change is not allowed or invalid
        """
        with logfire.span(
            "journal_service.update", entry_id=str(entry_id), fields=sorted(changes)
        ):
            entry = await self.get(user_id, entry_id)
            updated = apply_changes(entry, changes, UPDATABLE_FIELDS)
            return await self.journal_entry_repository.save(updated)

    async def delete(self, user_id: IdentityId, entry_id: JournalEntryId) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If missing or owned by another identity
        """
        with logfire.span("journal_service.delete", entry_id=str(entry_id)):
            deleted = await self.journal_entry_repository.delete(user_id, entry_id)
            if not deleted:
                raise NotFoundError("JournalEntry", str(entry_id))
            logfire.info("Journal entry deleted", entry_id=str(entry_id))
