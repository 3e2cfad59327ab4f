"""Protocol interfaces describing optional message capabilities."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DigitalMessage(Protocol):
    """Capability of messages delivered over an electronic transport."""

    def communication_method(self) -> str:
        """Describe the transport the message is sent through."""
        raise NotImplementedError


def is_digital(message: object) -> bool:
    """Return ``True`` when ``message`` exposes the digital capability."""
    return isinstance(message, DigitalMessage)


__all__ = ["DigitalMessage", "is_digital"]
