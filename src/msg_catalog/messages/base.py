"""Abstract message shared by every catalog entry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from typing import ClassVar

from ..core.datetime_utils import current_time, display_date, display_time
from ..core.errors import ValidationError
from ..core.ids import IdAllocator, shared_allocator
from ..core.models import MessageKind, require_text

PREVIEW_LENGTH = 15


def truncate_preview(text: str) -> str:
    """Shorten ``text`` to the preview length, marking cut text with ``...``."""
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH].strip() + "..."
    return text


def _require_datetime(value: datetime | None, field_name: str) -> datetime:
    if value is None:
        return current_time()
    if not isinstance(value, datetime):
        msg = f"{field_name} must be a datetime"
        raise ValidationError(msg)
    return value


class Message(ABC):
    """Common record carried by board postings, emails and reactions.

    Subclasses validate their own payload after calling ``__init__`` here and
    finish construction with :meth:`_assign_id`, so a rejected message never
    consumes an id.
    """

    kind: ClassVar[MessageKind]

    def __init__(
        self,
        sender: str,
        content: str,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
    ) -> None:
        """Validate and store the fields common to every message."""
        self._id: int | None = None
        self._sender = require_text(sender, "Sender name")
        self._content = require_text(content, "Message content")
        self._send_date = _require_datetime(send_date, "sendDate")
        self._send_time = _require_datetime(send_time, "sendTime")

    def _assign_id(self, allocator: IdAllocator | None) -> None:
        if self._id is not None:
            return
        self._id = (allocator or shared_allocator()).next_id()

    @property
    def id(self) -> int:
        """Unique identity assigned at construction."""
        if self._id is None:
            msg = f"{type(self).__name__} was not fully constructed"
            raise RuntimeError(msg)
        return self._id

    @property
    def sender(self) -> str:
        return self._sender

    @property
    def content(self) -> str:
        return self._content

    @property
    def send_date(self) -> datetime:
        return self._send_date

    @property
    def send_time(self) -> datetime:
        return self._send_time

    @property
    def message_type(self) -> str:
        """Display name of the variant: ``Board``, ``Email`` or ``Reaction``."""
        return self.kind.value

    def find(self, keywords: str | Iterable[str | None] | None) -> bool:
        """Return ``True`` when the content contains any non-blank keyword.

        Matching is a case-insensitive substring test. ``None`` or an empty
        collection never matches. A plain string counts as a single keyword.
        """
        if isinstance(keywords, str):
            keywords = (keywords,)
        if not keywords or not self._content:
            return False
        text = self._content.casefold()
        for keyword in keywords:
            if keyword is None or not keyword.strip():
                continue
            if keyword.casefold() in text:
                return True
        return False

    @abstractmethod
    def generate_preview(self) -> str:
        """Return a single-line summary of the message."""

    def __str__(self) -> str:
        return (
            f"Message ID: {self.id}"
            f"\nSender: {self._sender}"
            f"\nContent: {self._content}"
            f"\nDate: {display_date(self._send_date)}"
            f"\nTime: {display_time(self._send_time)}"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._id} sender={self._sender!r}>"


__all__ = ["Message", "PREVIEW_LENGTH", "truncate_preview"]
