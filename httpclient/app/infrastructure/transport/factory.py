"""Transport factory: selects implementation from config. Only place that imports concrete transports."""
from __future__ import annotations

from httpclient.app.config.settings import ClientSettings
from httpclient.app.ports.transport import Transport
from httpclient.app.infrastructure.transport.socket_transport import SocketTransport


def create_transport(settings: ClientSettings) -> Transport:
    backend = settings.transport_backend.strip().lower()

    if backend == "socket":
        return SocketTransport(
            recv_buffer_size=settings.recv_buffer_size,
            timeout_seconds=settings.socket_timeout_seconds,
        )

    raise ValueError(f"Unsupported transport backend: {backend}")
