"""Email messages carrying a subject and file attachments."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..core.errors import AttachmentError, ValidationError
from ..core.ids import IdAllocator
from ..core.interfaces import DigitalMessage
from ..core.models import File, MessageKind, require_text
from .base import Message

LOGGER = logging.getLogger(__name__)

EMAIL_TRANSPORT = "Sent via Email Server"


class EmailMessage(Message, DigitalMessage):
    """Email with a subject line and an ordered attachment list.

    Attachments may repeat. The :attr:`attachments` accessor returns a copy.
    """

    kind = MessageKind.EMAIL

    def __init__(
        self,
        sender: str,
        content: str,
        subject: str,
        attachments: Iterable[File] | None = None,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
        allocator: IdAllocator | None = None,
    ) -> None:
        super().__init__(sender, content, send_date, send_time)
        self.subject = subject
        self._attachments: list[File] = list(attachments or ())
        self._assign_id(allocator)

    @property
    def subject(self) -> str:
        return self._subject

    @subject.setter
    def subject(self, value: str) -> None:
        self._subject = require_text(value, "Subject")

    @property
    def attachments(self) -> list[File]:
        """Attached files in insertion order."""
        return list(self._attachments)

    def add_attachment(self, file: File) -> None:
        """Append ``file`` to the attachment list."""
        if file is None:
            raise ValidationError("Attachment cannot be null")
        self._attachments.append(file)

    def remove_attachment(self, file: File) -> None:
        """Remove every attachment equal to ``file``.

        Raises:
            AttachmentError: If ``file`` is ``None`` or no attachment matches.
        """
        if file is None:
            raise AttachmentError("Attachment cannot be null")
        remaining = [attached for attached in self._attachments if attached != file]
        removed = len(self._attachments) - len(remaining)
        if removed == 0:
            raise AttachmentError("Attachment does not exist!")
        self._attachments = remaining
        LOGGER.debug("Removed %d attachment(s) from email %s", removed, self.id)

    def communication_method(self) -> str:
        return EMAIL_TRANSPORT

    def generate_preview(self) -> str:
        return f"[Email] Subject: {self._subject} | From: {self.sender}"

    def __str__(self) -> str:
        lines = [f"subject:{self._subject}", super().__str__()]
        if not self._attachments:
            lines.append("Attachment List: None.")
        else:
            lines.append("Attachment List:")
            lines.extend(f"- {file}" for file in self._attachments)
        return "\n".join(lines) + "\n"


__all__ = ["EMAIL_TRANSPORT", "EmailMessage"]
