"""Concrete Transport over a blocking TCP socket (injected where Transport is needed)."""
from __future__ import annotations

import socket
from typing import Any

from loguru import logger

from httpclient.app.core import SERVICE_NAME
from httpclient.app.domain.errors import RequestError


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class SocketTransport:
    """Transport implementation using one fresh socket per exchange.

    The socket is closed when the exchange ends. With timeout_seconds=None the
    socket blocks indefinitely on a silent peer.
    """

    def __init__(self, *, recv_buffer_size: int = 4096, timeout_seconds: float | None = None) -> None:
        self._recv_buffer_size = recv_buffer_size
        self._timeout_seconds = timeout_seconds

    def exchange(self, host: str, port: int, payload: bytes) -> bytes:
        try:
            sock = socket.create_connection((host, port), timeout=self._timeout_seconds)
        except OSError as exc:
            logger.warning("connect to {}:{} failed: {}", host, port, exc)
            raise RequestError("could not connect to server") from exc

        with sock:
            _log("transport_connected", host=host, port=port)
            try:
                sock.sendall(payload)
            except OSError as exc:
                logger.warning("write to {}:{} failed: {}", host, port, exc)
                raise RequestError("could not write request") from exc

            try:
                raw = self._read_to_end(sock)
            except OSError as exc:
                logger.warning("read from {}:{} failed: {}", host, port, exc)
                raise RequestError("could not read response") from exc

        _log("transport_response_read", host=host, port=port, size=len(raw))
        return raw

    def _read_to_end(self, sock: socket.socket) -> bytes:
        chunks: list[bytes] = []
        while True:
            chunk = sock.recv(self._recv_buffer_size)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)
