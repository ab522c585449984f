"""Shared base for domain models."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Timezone-aware current time; every stored timestamp is UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Frozen pydantic model.

    Changes go through `model_copy(update=...)` in the services, so a model
    handed to a repository is never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
