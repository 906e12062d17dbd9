"""A small blocking HTTP/1.1 client: Builder -> Request -> send() -> Response.

Logging is off by default; call ``logger.enable("httpclient")`` to see events.
"""

from loguru import logger

from httpclient.app.composition import ClientDependencies, create_client_dependencies
from httpclient.app.config.settings import ClientSettings
from httpclient.app.domain.builder import Builder
from httpclient.app.domain.errors import BuilderError, HttpClientError, RequestError, ResponseError
from httpclient.app.domain.request import Request
from httpclient.app.domain.response import Response
from httpclient.app.domain.status_code import StatusCode
from httpclient.app.infrastructure.transport.socket_transport import SocketTransport
from httpclient.app.ports.transport import Transport

__all__ = [
    "Builder",
    "Request",
    "Response",
    "StatusCode",
    "HttpClientError",
    "BuilderError",
    "RequestError",
    "ResponseError",
    "ClientSettings",
    "ClientDependencies",
    "create_client_dependencies",
    "Transport",
    "SocketTransport",
]

logger.disable("httpclient")
