from __future__ import annotations

import socket
import threading

import pytest

from httpclient.app.config.settings import ClientSettings
from httpclient.app.domain.errors import RequestError


class FakeTransport:
    """Implements Transport for tests; returns canned replies in order and records payloads."""

    def __init__(
        self,
        *replies: bytes,
        raise_on_exchange: Exception | None = None,
    ) -> None:
        self._replies = list(replies)
        self._raise_on_exchange = raise_on_exchange
        self.calls: list[tuple[str, int, bytes]] = []

    def exchange(self, host: str, port: int, payload: bytes) -> bytes:
        self.calls.append((host, port, payload))
        if self._raise_on_exchange is not None:
            raise self._raise_on_exchange
        if not self._replies:
            raise RequestError("could not read response")
        return self._replies.pop(0)


class LocalHttpServer:
    """One-shot-per-connection TCP server on 127.0.0.1 answering with fixed bytes.

    Reads the request head plus Content-Length body bytes, records them, replies,
    then closes the connection so the client reads to EOF.
    """

    def __init__(self, reply: bytes, connections: int = 1) -> None:
        self._reply = reply
        self._connections = connections
        self._listener = socket.create_server(("127.0.0.1", 0))
        self._listener.settimeout(5)
        self.port = self._listener.getsockname()[1]
        self.received: list[bytes] = []
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def start(self) -> "LocalHttpServer":
        self._thread.start()
        return self

    def stop(self) -> None:
        self._thread.join(timeout=5)
        self._listener.close()

    def _serve(self) -> None:
        for _ in range(self._connections):
            try:
                conn, _ = self._listener.accept()
            except OSError:
                return
            with conn:
                conn.settimeout(5)
                self.received.append(self._read_request(conn))
                conn.sendall(self._reply)

    def _read_request(self, conn: socket.socket) -> bytes:
        data = b""
        while b"\r\n\r\n" not in data:
            chunk = conn.recv(4096)
            if not chunk:
                return data
            data += chunk
        head, _, body = data.partition(b"\r\n\r\n")
        length = 0
        for line in head.split(b"\r\n")[1:]:
            name, _, value = line.partition(b": ")
            if name.lower() == b"content-length":
                length = int(value)
        while len(body) < length:
            chunk = conn.recv(4096)
            if not chunk:
                break
            body += chunk
        return head + b"\r\n\r\n" + body


@pytest.fixture()
def settings() -> ClientSettings:
    return ClientSettings(
        HTTP_CLIENT_DEFAULT_PORT=80,
        HTTP_CLIENT_DEFAULT_HTTP_VERSION="1.1",
        HTTP_CLIENT_DEFAULT_METHOD="GET",
        HTTP_CLIENT_SOCKET_TIMEOUT_SECONDS=5.0,
    )


@pytest.fixture()
def local_server():
    """Factory fixture: local_server(reply, connections=1) -> started LocalHttpServer."""
    servers: list[LocalHttpServer] = []

    def _start(reply: bytes, connections: int = 1) -> LocalHttpServer:
        server = LocalHttpServer(reply, connections).start()
        servers.append(server)
        return server

    yield _start
    for server in servers:
        server.stop()
