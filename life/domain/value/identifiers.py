"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

# Issued by the credential store; profiles share it
IdentityId = NewType("IdentityId", UUID)

InviteCodeId = NewType("InviteCodeId", UUID)
DecisionId = NewType("DecisionId", UUID)
ReflectionId = NewType("ReflectionId", UUID)
JournalEntryId = NewType("JournalEntryId", UUID)
LifePhaseId = NewType("LifePhaseId", UUID)
GoalId = NewType("GoalId", UUID)
PrivateProfileId = NewType("PrivateProfileId", UUID)
