"""Ordered in-memory collection of messages."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from ..core.errors import DuplicateMessageError, MessageNotFoundError
from ..core.ids import IdAllocator, shared_allocator
from ..core.interfaces import is_digital
from ..core.models import File, MessageKind, Priority, ReactionType
from ..messages import BoardMessage, EmailMessage, Message, ReactionMessage
from .keywords import normalize_keywords

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of a keyword search over the catalog."""

    keywords: tuple[str, ...]
    matches: tuple[Message, ...]

    @property
    def count(self) -> int:
        return len(self.matches)


class MessageCatalog:
    """Insertion-ordered store of messages for the lifetime of the process.

    The catalog is only mutated through :meth:`add` and :meth:`delete`; entries
    are never reordered. It owns the allocator used by its ``build_*``
    helpers so every message it creates draws from one counter.
    """

    def __init__(
        self,
        messages: Iterable[Message] = (),
        *,
        allocator: IdAllocator | None = None,
    ) -> None:
        """Create a catalog, optionally pre-populated with ``messages``."""
        self._allocator = allocator or shared_allocator()
        self._messages: list[Message] = []
        for message in messages:
            self.add(message)

    @property
    def allocator(self) -> IdAllocator:
        return self._allocator

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __bool__(self) -> bool:
        return bool(self._messages)

    # Construction helpers ----------------------------------------------------
    def build_board(
        self,
        sender: str,
        content: str,
        priority: Priority,
        reactions: Iterable[ReactionMessage] | None = None,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
    ) -> BoardMessage:
        """Construct a board message with this catalog's allocator."""
        return BoardMessage(
            sender,
            content,
            priority,
            reactions,
            send_date=send_date,
            send_time=send_time,
            allocator=self._allocator,
        )

    def build_email(
        self,
        sender: str,
        content: str,
        subject: str,
        attachments: Iterable[File] | None = None,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
    ) -> EmailMessage:
        """Construct an email message with this catalog's allocator."""
        return EmailMessage(
            sender,
            content,
            subject,
            attachments,
            send_date=send_date,
            send_time=send_time,
            allocator=self._allocator,
        )

    def build_reaction(
        self,
        sender: str,
        content: str,
        reaction_type: ReactionType,
        *,
        send_date: datetime | None = None,
        send_time: datetime | None = None,
    ) -> ReactionMessage:
        """Construct a reaction message with this catalog's allocator."""
        return ReactionMessage(
            sender,
            content,
            reaction_type,
            send_date=send_date,
            send_time=send_time,
            allocator=self._allocator,
        )

    # Mutations ---------------------------------------------------------------
    def add(self, message: Message) -> Message:
        """Append ``message`` to the end of the catalog and return it.

        Raises:
            DuplicateMessageError: If an entry already holds the same id.
        """
        if not isinstance(message, Message):
            msg = f"Only messages can be stored, got {type(message).__name__}"
            raise TypeError(msg)
        if self.get(message.id) is not None:
            msg = f"A message with Id {message.id} is already in the catalog"
            raise DuplicateMessageError(msg)
        self._messages.append(message)
        LOGGER.debug("Added %s message %s", message.message_type, message.id)
        return message

    def delete(self, message_id: int) -> bool:
        """Remove the message holding ``message_id``.

        Returns ``False`` without touching the catalog when no entry matches.
        """
        for index, message in enumerate(self._messages):
            if message.id == message_id:
                del self._messages[index]
                LOGGER.debug("Deleted message %s", message_id)
                return True
        LOGGER.debug("No message with id %s to delete", message_id)
        return False

    def attach_reaction(self, board_id: int, reaction: ReactionMessage) -> BoardMessage:
        """Append ``reaction`` to the board message holding ``board_id``.

        Raises:
            MessageNotFoundError: If no board message has that id.
        """
        board = self.get(board_id)
        if not isinstance(board, BoardMessage):
            msg = f"No board message found with Id {board_id}"
            raise MessageNotFoundError(msg)
        board.add_reaction(reaction)
        LOGGER.debug("Attached reaction %s to board message %s", reaction.id, board_id)
        return board

    # Queries -----------------------------------------------------------------
    def all(self) -> tuple[Message, ...]:
        """Return every message in catalog order."""
        return tuple(self._messages)

    def get(self, message_id: int) -> Message | None:
        """Return the message holding ``message_id`` if present."""
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    def filter(self, kind: MessageKind) -> Iterator[Message]:
        """Yield messages matching ``kind`` in catalog order."""
        if not isinstance(kind, MessageKind):
            msg = f"Unknown message kind: {kind!r}"
            raise ValueError(msg)
        for message in tuple(self._messages):
            if kind is MessageKind.DIGITAL:
                if is_digital(message):
                    yield message
            elif message.kind is kind:
                yield message

    def boards(self) -> tuple[BoardMessage, ...]:
        """Return the board messages in catalog order."""
        return tuple(
            message
            for message in self.filter(MessageKind.BOARD)
            if isinstance(message, BoardMessage)
        )

    def search(self, keywords: str | Iterable[str | None] | None) -> SearchResult:
        """Return the messages whose content contains any of ``keywords``."""
        words = normalize_keywords(keywords)
        matches = tuple(message for message in self._messages if message.find(words))
        LOGGER.debug("Search for %s matched %d message(s)", list(words), len(matches))
        return SearchResult(keywords=words, matches=matches)

    def previews(self) -> Iterator[str]:
        """Yield one preview line per message in catalog order."""
        for message in tuple(self._messages):
            yield message.generate_preview()


__all__ = ["MessageCatalog", "SearchResult"]
