"""In-memory repository implementations for testing."""

from .decision import InMemoryDecisionRepository
from .invite_code import InMemoryInviteCodeRepository
from .journal_entry import InMemoryJournalEntryRepository
from .life_phase import InMemoryLifePhaseRepository
from .private_profile import InMemoryPrivateProfileRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryDecisionRepository",
    "InMemoryInviteCodeRepository",
    "InMemoryJournalEntryRepository",
    "InMemoryLifePhaseRepository",
    "InMemoryPrivateProfileRepository",
    "InMemoryProfileRepository",
]
