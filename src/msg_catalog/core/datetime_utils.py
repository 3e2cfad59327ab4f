"""Datetime helpers shared by the message model."""

from __future__ import annotations

from datetime import datetime

__all__ = [
    "current_time",
    "display_date",
    "display_time",
]


def current_time() -> datetime:
    """Return the local wall-clock time used to stamp new messages."""
    return datetime.now().astimezone()


def display_date(value: datetime) -> str:
    """Return the calendar date portion of ``value`` as ``YYYY-MM-DD``."""
    return value.date().isoformat()


def display_time(value: datetime) -> str:
    """Return the clock portion of ``value`` as ``HH:MM:SS``."""
    return value.strftime("%H:%M:%S")
