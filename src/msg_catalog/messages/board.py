"""Board postings with a priority and attached reactions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..core.errors import ValidationError
from ..core.ids import IdAllocator
from ..core.models import MessageKind, Priority
from .base import Message, truncate_preview
from .reaction import ReactionMessage


class BoardMessage(Message):
    """Posting on the shared board.

    Reactions are owned by the board message and can only be appended; the
    :attr:`reactions` accessor hands out a copy.
    """

    kind = MessageKind.BOARD

    def __init__(
        self,
        sender: str,
        content: str,
        priority: Priority,
        reactions: Iterable[ReactionMessage] | None = None,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
        allocator: IdAllocator | None = None,
    ) -> None:
        super().__init__(sender, content, send_date, send_time)
        self.priority = priority
        self._reactions: list[ReactionMessage] = list(reactions or ())
        self._assign_id(allocator)

    @property
    def priority(self) -> Priority:
        return self._priority

    @priority.setter
    def priority(self, value: Priority) -> None:
        if not isinstance(value, Priority):
            raise ValidationError("priority cannot be null")
        self._priority = value

    @property
    def reactions(self) -> list[ReactionMessage]:
        """Reactions in the order they were added."""
        return list(self._reactions)

    def add_reaction(self, reaction: ReactionMessage) -> None:
        """Append ``reaction`` to this posting."""
        if reaction is None:
            raise ValidationError("reaction cannot be null")
        self._reactions.append(reaction)

    def generate_preview(self) -> str:
        return f"[Board] {self.sender}: {truncate_preview(self.content)}"

    def __str__(self) -> str:
        lines = [f"Priority:{self._priority.name}", super().__str__()]
        if not self._reactions:
            lines.append("Reactions: No Reactions Found")
        else:
            lines.append("Reactions:")
            lines.extend(f"- {reaction}" for reaction in self._reactions)
        return "\n".join(lines) + "\n"


__all__ = ["BoardMessage"]
