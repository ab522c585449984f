"""PostgreSQL repository implementations."""

from life.persistence.repository.decision import PostgresDecisionRepository
from life.persistence.repository.invite_code import PostgresInviteCodeRepository
from life.persistence.repository.journal_entry import PostgresJournalEntryRepository
from life.persistence.repository.life_phase import PostgresLifePhaseRepository
from life.persistence.repository.private_profile import (
    PostgresPrivateProfileRepository,
)
from life.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresInviteCodeRepository",
    "PostgresDecisionRepository",
    "PostgresJournalEntryRepository",
    "PostgresLifePhaseRepository",
    "PostgresPrivateProfileRepository",
]
