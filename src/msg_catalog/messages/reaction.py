"""Reaction messages expressing a sentiment."""

from __future__ import annotations

from datetime import datetime

from ..core.errors import ReactionError
from ..core.ids import IdAllocator
from ..core.models import MessageKind, ReactionType
from .base import Message, truncate_preview


class ReactionMessage(Message):
    """Sentiment message, standalone in the catalog or attached to a board."""

    kind = MessageKind.REACTION

    def __init__(
        self,
        sender: str,
        content: str,
        reaction_type: ReactionType,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
        allocator: IdAllocator | None = None,
    ) -> None:
        super().__init__(sender, content, send_date, send_time)
        self.reaction_type = reaction_type
        self._assign_id(allocator)

    @property
    def reaction_type(self) -> ReactionType:
        return self._reaction_type

    @reaction_type.setter
    def reaction_type(self, value: ReactionType) -> None:
        if not isinstance(value, ReactionType):
            raise ReactionError("Reaction type cannot be null.")
        self._reaction_type = value

    def generate_preview(self) -> str:
        return (
            f"[Reaction] {self.sender}: {self._reaction_type.name}"
            f" - {truncate_preview(self.content)}"
        )

    def __str__(self) -> str:
        return (
            "Reaction Message\n"
            f"Sender: {self.sender}\n"
            f"Reaction: {self._reaction_type.name}\n"
            f"Content: {self.content}\n"
        )


__all__ = ["ReactionMessage"]
