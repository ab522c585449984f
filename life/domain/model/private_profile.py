"""Private profile entity."""

from datetime import datetime

from pydantic import Field

from life.domain.model.common import DomainModel, utc_now
from life.domain.value import IdentityId, PrivateProfileId


class PrivateProfile(DomainModel):
    """Personal reflections on values and joys. One per identity."""

    id: PrivateProfileId
    user_id: IdentityId
    values: list[str] = Field(default_factory=list)
    joys: list[str] = Field(default_factory=list)
    remembered_as: str = ""
    share_code: str | None = None
    share_expiry: datetime | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
