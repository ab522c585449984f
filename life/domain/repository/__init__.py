"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from life.domain.repository.decision import DecisionRepository
from life.domain.repository.invite_code import InviteCodeRepository
from life.domain.repository.journal_entry import JournalEntryRepository
from life.domain.repository.life_phase import LifePhaseRepository
from life.domain.repository.private_profile import PrivateProfileRepository
from life.domain.repository.profile import ProfileRepository

__all__ = [
    "DecisionRepository",
    "InviteCodeRepository",
    "JournalEntryRepository",
    "LifePhaseRepository",
    "PrivateProfileRepository",
    "ProfileRepository",
]
