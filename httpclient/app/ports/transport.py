"""Transport port: one blocking request/response exchange with a remote host.

Domain code depends on this port; infrastructure (plain sockets) implements it.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Port: connect, write the payload, read until the peer closes."""

    def exchange(self, host: str, port: int, payload: bytes) -> bytes:
        """Return every byte the peer sent before closing; raise RequestError on failure."""
        ...
