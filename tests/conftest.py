"""Shared fixtures for the message catalog tests."""

from __future__ import annotations

import pytest

from msg_catalog.catalog import MessageCatalog
from msg_catalog.core.ids import IdAllocator


@pytest.fixture
def allocator() -> IdAllocator:
    """Fresh id counter so id assertions do not depend on test order."""

    return IdAllocator()


@pytest.fixture
def catalog(allocator: IdAllocator) -> MessageCatalog:
    return MessageCatalog(allocator=allocator)
