"""Immutable request and the blocking send pipeline: serialize, exchange, parse."""
from __future__ import annotations

import asyncio
import functools
from concurrent.futures import Executor
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from loguru import logger

from httpclient.app.core import SERVICE_NAME
from httpclient.app.domain.parser import parse_response
from httpclient.app.domain.serializer import serialize_request

if TYPE_CHECKING:
    from httpclient.app.domain.response import Response
    from httpclient.app.ports.transport import Transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


@dataclass(frozen=True)
class Request:
    """Fully resolved outbound HTTP message. Usually produced by Builder.build().

    Headers are copied on construction and exposed read-only.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(hash=False)
    body: str
    host: str
    port: int
    http_version: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def snapshot(self) -> Request:
        """Independent copy whose header mapping is not shared with this one."""
        return replace(self, headers=dict(self.headers))

    def send(self, transport: Transport | None = None) -> Response:
        """Send synchronously and parse the reply.

        Raises RequestError on connect/write/read failure and ResponseError when
        the reply is not a well-formed HTTP response. No retries.
        """
        if transport is None:
            from httpclient.app.composition import default_transport

            transport = default_transport()

        payload = serialize_request(self)
        _log(
            "request_sending",
            method=self.method,
            host=self.host,
            port=self.port,
            path=self.path,
            size=len(payload),
        )
        raw = transport.exchange(self.host, self.port, payload)
        response = parse_response(raw, self)
        _log(
            "response_parsed",
            host=self.host,
            path=self.path,
            status_code=int(response.status_code),
        )
        return response

    async def async_send(
        self,
        executor: Executor | None = None,
        transport: Transport | None = None,
    ) -> Response:
        """Run the blocking send() on an executor (loop default when None).

        There is no cooperative yielding inside the round trip and cancelling the
        awaiting task does not interrupt the socket.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, functools.partial(self.send, transport))
