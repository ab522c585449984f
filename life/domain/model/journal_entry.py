"""Journal entry entity."""

from datetime import datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import IdentityId, JournalEntryId, LifePhaseId, Mood


class JournalEntry(DomainModel):
    """Free-form journal entry with an optional mood tag."""

    id: JournalEntryId
    user_id: IdentityId
    title: str | None = None
    content: str = Field(min_length=1)
    mood: Mood | None = None
    life_phase_id: LifePhaseId | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
