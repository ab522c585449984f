"""Base classes for value objects."""

from typing import Any, Generic, TypeVar

from pydantic import ConfigDict, RootModel, field_validator

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive.

    Compared and hashed by value. `.root` holds the primitive and
    `model_dump()` returns it bare, so wrapped values serialize as plain
    JSON strings.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


class TrimmedString(RootValueObject[str]):
    """String value that ignores surrounding whitespace.

    Subclasses validate the trimmed text; user input copied from emails and
    chat often carries a trailing space or newline.
    """

    @field_validator("root", mode="before")
    @classmethod
    def trim(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v
