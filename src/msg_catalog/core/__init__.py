"""Core utilities for configuration, logging, identity and value types."""

from .config import AppSettings, CatalogSettings, ShellSettings, load_app_settings
from .errors import (
    AttachmentError,
    CatalogError,
    DuplicateMessageError,
    MessageNotFoundError,
    ReactionError,
    ValidationError,
)
from .ids import IdAllocator, shared_allocator
from .interfaces import DigitalMessage, is_digital
from .logging import configure_logging
from .models import File, MessageKind, Priority, ReactionType

__all__ = [
    "AppSettings",
    "AttachmentError",
    "CatalogError",
    "CatalogSettings",
    "DuplicateMessageError",
    "DigitalMessage",
    "File",
    "IdAllocator",
    "MessageKind",
    "MessageNotFoundError",
    "Priority",
    "ReactionError",
    "ReactionType",
    "ShellSettings",
    "ValidationError",
    "configure_logging",
    "is_digital",
    "load_app_settings",
    "shared_allocator",
]
