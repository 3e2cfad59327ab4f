"""Message variants stored in the catalog."""

from .base import PREVIEW_LENGTH, Message
from .board import BoardMessage
from .email import EMAIL_TRANSPORT, EmailMessage
from .reaction import ReactionMessage

__all__ = [
    "BoardMessage",
    "EMAIL_TRANSPORT",
    "EmailMessage",
    "Message",
    "PREVIEW_LENGTH",
    "ReactionMessage",
]
