"""Domain model entities."""

from life.domain.model.decision import Decision, Reflection
from life.domain.model.export import ExportSnapshot
from life.domain.model.identity import (
    AuthorizationRequest,
    AuthSession,
    Identity,
    SignUpResult,
)
from life.domain.model.invite_code import InviteCode
from life.domain.model.journal_entry import JournalEntry
from life.domain.model.life_phase import Goal, LifePhase
from life.domain.model.private_profile import PrivateProfile
from life.domain.model.profile import Preferences, Profile

__all__ = [
    "AuthorizationRequest",
    "AuthSession",
    "Decision",
    "ExportSnapshot",
    "Goal",
    "Identity",
    "InviteCode",
    "JournalEntry",
    "LifePhase",
    "Preferences",
    "PrivateProfile",
    "Profile",
    "Reflection",
    "SignUpResult",
]
