"""Life phase and goal entities."""

from datetime import date, datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import GoalId, GoalStatus, IdentityId, LifePhaseId


class Goal(DomainModel):
    """Goal pursued during a life phase."""

    id: GoalId
    phase_id: LifePhaseId
    user_id: IdentityId
    title: str = Field(min_length=1)
    description: str | None = None
    status: GoalStatus = GoalStatus.ACTIVE
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class LifePhase(DomainModel):
    """A user-defined chapter of time.

    Business rules:
    - At most one active phase per identity, enforced by the store's
      atomic set-active operation
    - Goals are ordered oldest first
    """

    id: LifePhaseId
    user_id: IdentityId
    name: str = Field(min_length=1)
    description: str | None = None
    start_date: date
    end_date: date | None = None
    is_active: bool = False
    values: list[str] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
