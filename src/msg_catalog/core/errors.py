"""Error types raised by the message model and catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for recoverable message catalog failures."""


class ValidationError(CatalogError, ValueError):
    """Raised when a required message field is missing, blank or invalid."""


class ReactionError(CatalogError):
    """Raised when a reaction is built or mutated without a reaction type."""


class AttachmentError(CatalogError):
    """Raised when removing an attachment that is missing or not present."""


class MessageNotFoundError(CatalogError, LookupError):
    """Raised when no catalog entry matches a requested message id."""


class DuplicateMessageError(CatalogError):
    """Raised when adding a message whose id is already in the catalog."""


__all__ = [
    "AttachmentError",
    "CatalogError",
    "DuplicateMessageError",
    "MessageNotFoundError",
    "ReactionError",
    "ValidationError",
]
