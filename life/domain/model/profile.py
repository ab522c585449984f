"""Profile entity."""

from datetime import datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import IdentityId, Theme, Username


class Preferences(DomainModel):
    """User preference set stored alongside the profile."""

    theme: Theme = Theme.SYSTEM
    reminder_enabled: bool = False
    reminder_time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")


class Profile(DomainModel):
    """Application-level record for an identity.

    Business rules:
    - `id` equals the owning identity's id
    - Created lazily on the first authenticated request
    - Username is optional, unique case-insensitively
    - Deleting the profile cascades to every record the identity owns
    """

    id: IdentityId
    email: str | None = None
    username: Username | None = None
    is_anonymous: bool = False
    preferences: Preferences = Field(default_factory=Preferences)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
