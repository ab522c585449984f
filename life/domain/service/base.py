"""Base service class for domain services."""

from typing import Any, TypeVar

from life.domain.error import ValidationError
from life.domain.model.common import DomainModel, utc_now

M = TypeVar("M", bound=DomainModel)


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities or talks to
    repositories and external collaborators.
    """

    pass


def apply_changes(entity: M, changes: dict[str, Any], updatable: frozenset[str]) -> M:
    """Return a re-validated copy of `entity` with a partial update applied.

    Args:
        entity: Current state
        changes: Fields to change (only keys present are touched)
        updatable: Field names callers may change

    Returns:
        New entity with `updated_at` refreshed

    Raises:
        ValidationError: If a change names a protected field or fails validation
    """
    forbidden = set(changes) - updatable
    if forbidden:
        raise ValidationError(f"Cannot update fields: {', '.join(sorted(forbidden))}")

    try:
        return type(entity).model_validate(
            {**entity.model_dump(), **changes, "updated_at": utc_now()}
        )
    except ValueError as e:
        raise ValidationError(str(e))
