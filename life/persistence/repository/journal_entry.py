"""PostgreSQL implementation of JournalEntry repository."""

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from life.domain.model import JournalEntry
from life.domain.repository import JournalEntryRepository
from life.domain.value import IdentityId, JournalEntryId
from life.persistence.mappers import journal_entry_to_dict, row_to_journal_entry
from life.persistence.tables import journal_entries_table


class PostgresJournalEntryRepository(JournalEntryRepository):
    """PostgreSQL implementation of JournalEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self, user_id: IdentityId) -> list[JournalEntry]:
        """List an identity's entries, newest first."""
        stmt = (
            select(journal_entries_table)
            .where(journal_entries_table.c.user_id == user_id)
            .order_by(journal_entries_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_journal_entry(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, user_id: IdentityId, entry_id: JournalEntryId
    ) -> JournalEntry | None:
        """Find one of an identity's entries."""
        stmt = select(journal_entries_table).where(
            journal_entries_table.c.id == entry_id,
            journal_entries_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_journal_entry(dict(row)) if row else None

    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save an entry (create or update)."""
        existing = await self.find_by_id(entry.user_id, entry.id)
        entry_dict = journal_entry_to_dict(entry)

        if existing:
            stmt = (
                journal_entries_table.update()
                .where(
                    journal_entries_table.c.id == entry.id,
                    journal_entries_table.c.user_id == entry.user_id,
                )
                .values(**entry_dict)
            )
        else:
            stmt = insert(journal_entries_table).values(**entry_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return entry

    async def delete(self, user_id: IdentityId, entry_id: JournalEntryId) -> bool:
        """Delete one of an identity's entries."""
        stmt = (
            delete(journal_entries_table)
            .where(
                journal_entries_table.c.id == entry_id,
                journal_entries_table.c.user_id == user_id,
            )
            .returning(journal_entries_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
