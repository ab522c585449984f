"""Decision and reflection entities."""

from datetime import datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import DecisionId, IdentityId, LifePhaseId, ReflectionId


class Reflection(DomainModel):
    """A later note looking back on a decision."""

    id: ReflectionId
    decision_id: DecisionId
    user_id: IdentityId
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now)


class Decision(DomainModel):
    """A logged decision with a confidence rating.

    `life_phase_id` is a soft reference; the store nulls it when the phase goes.
    Reflections are ordered oldest first.
    """

    id: DecisionId
    user_id: IdentityId
    title: str = Field(min_length=1)
    description: str = ""
    confidence_level: int = Field(ge=1, le=5)
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    life_phase_id: LifePhaseId | None = None
    reflections: list[Reflection] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
