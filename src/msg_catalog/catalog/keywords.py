"""Keyword normalisation for catalog search."""

from __future__ import annotations

from collections.abc import Iterable


def normalize_keywords(raw: str | Iterable[str | None] | None) -> tuple[str, ...]:
    """Trim keywords and drop blank entries, keeping order and repeats."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = (raw,)
    return tuple(word.strip() for word in raw if word is not None and word.strip())


def parse_keywords(line: str | None, separator: str = ",") -> tuple[str, ...]:
    """Split a raw input line into normalised keywords."""
    if not line:
        return ()
    return normalize_keywords(line.split(separator))


__all__ = ["normalize_keywords", "parse_keywords"]
