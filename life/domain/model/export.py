"""Data export snapshot."""

from datetime import datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.model.decision import Decision
from life.domain.model.journal_entry import JournalEntry
from life.domain.model.life_phase import LifePhase
from life.domain.model.private_profile import PrivateProfile


class ExportSnapshot(DomainModel):
    """Everything an identity owns, as handed back to the user."""

    decisions: list[Decision] = Field(default_factory=list)
    journal_entries: list[JournalEntry] = Field(default_factory=list)
    life_phases: list[LifePhase] = Field(default_factory=list)
    private_profile: PrivateProfile | None = None
    exported_at: datetime = Field(default_factory=utc_now)
