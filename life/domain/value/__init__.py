"""Domain value objects for the journaling service."""

from life.domain.value.identifiers import (
    DecisionId,
    GoalId,
    IdentityId,
    InviteCodeId,
    JournalEntryId,
    LifePhaseId,
    PrivateProfileId,
    ReflectionId,
)
from life.domain.value.types import (
    GoalStatus,
    InviteCodeValue,
    Mood,
    Theme,
    Username,
    username_error,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "InviteCodeId",
    "DecisionId",
    "ReflectionId",
    "JournalEntryId",
    "LifePhaseId",
    "GoalId",
    "PrivateProfileId",
    # Types
    "GoalStatus",
    "InviteCodeValue",
    "Mood",
    "Theme",
    "Username",
    "username_error",
]
