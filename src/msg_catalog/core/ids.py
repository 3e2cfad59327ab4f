"""Monotonic identity allocation for messages."""

from __future__ import annotations

import logging
from functools import lru_cache
from threading import Lock

LOGGER = logging.getLogger(__name__)


class IdAllocator:
    """Hand out unique, strictly increasing positive integer ids.

    The counter starts at ``start`` and only moves forward; there is no
    reset. Increments happen under a lock so the uniqueness guarantee
    survives callers that construct messages from several threads.
    """

    def __init__(self, start: int = 1) -> None:
        """Initialise the counter at ``start``."""
        if start < 1:
            msg = f"Id counter must start at a positive value, got {start}"
            raise ValueError(msg)
        self._next = start
        self._lock = Lock()

    def next_id(self) -> int:
        """Return the current value and advance the counter."""
        with self._lock:
            allocated = self._next
            self._next += 1
        LOGGER.debug("Allocated message id %s", allocated)
        return allocated

    def peek(self) -> int:
        """Return the id the next call to :meth:`next_id` would hand out."""
        with self._lock:
            return self._next


@lru_cache(maxsize=1)
def shared_allocator() -> IdAllocator:
    """Return the process-wide allocator used when none is supplied."""
    return IdAllocator()


__all__ = ["IdAllocator", "shared_allocator"]
