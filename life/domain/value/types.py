"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and canonical forms.
"""

import re
from enum import Enum

from pydantic import field_validator

from life.domain.value.common import TrimmedString

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class Mood(str, Enum):
    """Optional mood tag on a journal entry."""

    CALM = "calm"
    CONTENT = "content"
    UNCERTAIN = "uncertain"
    ANXIOUS = "anxious"
    HOPEFUL = "hopeful"
    GRATEFUL = "grateful"


class GoalStatus(str, Enum):
    """Status of a goal within a life phase."""

    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"
    ABANDONED = "abandoned"


class Theme(str, Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class InviteCodeValue(TrimmedString):
    """Invite code in canonical form.

    Codes are case-insensitive: surrounding whitespace is trimmed and the
    result upper-cased, so "abc123 " and "ABC123" are the same code.
    """

    @field_validator("root")
    @classmethod
    def canonicalize(cls, v: str) -> str:
        """Upper-case the trimmed code."""
        canonical = v.upper()
        if len(canonical) < 1 or len(canonical) > 255:
            raise ValueError("Invite code must be 1-255 characters")
        return canonical


def username_error(value: str) -> str | None:
    """Return the user-facing reason a username is malformed, if any.

    Args:
        value: Trimmed username candidate

    Returns:
        Reason string, or None when the format is acceptable
    """
    if len(value) < USERNAME_MIN_LENGTH:
        return "Username must be at least 3 characters"
    if len(value) > USERNAME_MAX_LENGTH:
        return "Username must be 30 characters or less"
    if not USERNAME_PATTERN.match(value):
        return "Username can only contain letters, numbers, and underscores"
    return None


class Username(TrimmedString):
    """Profile username.

    3-30 characters, letters, digits and underscore. Stored as entered;
    uniqueness is case-insensitive (see `canonical`).
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        error = username_error(v)
        if error:
            raise ValueError(error)
        return v

    @property
    def canonical(self) -> str:
        """Lower-cased form used for uniqueness checks."""
        return self.root.lower()
