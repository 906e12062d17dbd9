"""Response value object returned by Request.send()."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from loguru import logger

from httpclient.app.core import SERVICE_NAME
from httpclient.app.domain.status_code import StatusCode

if TYPE_CHECKING:
    from httpclient.app.domain.request import Request
    from httpclient.app.ports.transport import Transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


@dataclass(frozen=True)
class Response:
    """Parsed response plus the snapshot of the Request that produced it."""

    status_code: StatusCode
    raw_response: str = field(repr=False)
    headers: Mapping[str, str] = field(hash=False)
    body: str
    request_used: Request

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def resend(self, transport: Transport | None = None) -> Response:
        """Send the stored request again. Always a new round trip."""
        _log(
            "response_resend",
            host=self.request_used.host,
            port=self.request_used.port,
            path=self.request_used.path,
        )
        return self.request_used.snapshot().send(transport)

    def __str__(self) -> str:
        return self.raw_response
