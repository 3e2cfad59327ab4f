"""In-memory message catalog and its helpers."""

from .catalog import MessageCatalog, SearchResult
from .defaults import seed_default_messages
from .keywords import normalize_keywords, parse_keywords

__all__ = [
    "MessageCatalog",
    "SearchResult",
    "normalize_keywords",
    "parse_keywords",
    "seed_default_messages",
]
