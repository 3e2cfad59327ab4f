"""Value types shared by the message model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ValidationError


class Priority(Enum):
    """Urgency of a board posting."""

    URGENT = "urgent"
    REGULAR = "regular"
    SPECIAL = "special"


class ReactionType(Enum):
    """Sentiment carried by a reaction message."""

    LIKE = "like"
    DISLIKE = "dislike"
    LAUGH = "laugh"
    LOVE = "love"


class MessageKind(Enum):
    """Selectors accepted by catalog filtering.

    ``BOARD``, ``EMAIL`` and ``REACTION`` match a concrete message variant;
    ``DIGITAL`` matches any message exposing the digital capability.
    """

    BOARD = "Board"
    EMAIL = "Email"
    REACTION = "Reaction"
    DIGITAL = "Digital"


def require_text(value: object, field_name: str) -> str:
    """Return ``value`` trimmed, raising when it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        msg = f"{field_name} cannot be null or blank"
        raise ValidationError(msg)
    return value.strip()


@dataclass(frozen=True, slots=True, eq=False)
class File:
    """Email attachment identified by its name and type.

    Two files are equal when both the name and the type match ignoring case.
    """

    name: str
    file_type: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, "File name"))
        object.__setattr__(
            self, "file_type", require_text(self.file_type, "File type")
        )

    def _key(self) -> tuple[str, str]:
        return (self.name.casefold(), self.file_type.casefold())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"File {{name='{self.name}', type='{self.file_type}'}}"


__all__ = [
    "File",
    "MessageKind",
    "Priority",
    "ReactionType",
    "require_text",
]
