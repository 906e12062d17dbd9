"""Request builder: mutable staging object frozen into a Request by build()."""
from __future__ import annotations

from typing import Any

from loguru import logger

from httpclient.app.config.settings import ClientSettings
from httpclient.app.constants import (
    DEFAULT_HEADERS,
    DEFAULT_HTTP_VERSION,
    DEFAULT_METHOD,
    DEFAULT_PORT,
    MAX_PORT,
)
from httpclient.app.core import SERVICE_NAME
from httpclient.app.domain.errors import BuilderError
from httpclient.app.domain.request import Request
from httpclient.app.domain.uri import parse_uri


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class Builder:
    """Accumulates request fields through chained setters.

    Port, HTTP version and method start as 80, "1.1" and "GET", or from the
    given ClientSettings when one is passed; the environment is never read
    here. Headers start as ``Connection: close``. Header keys are
    case-sensitive and ``header()`` overwrites an existing key. Not thread-safe;
    one builder per caller.
    """

    def __init__(self, settings: ClientSettings | None = None) -> None:
        self._host: str | None = None
        self._port: int | None = DEFAULT_PORT
        self._http_version: str | None = DEFAULT_HTTP_VERSION
        self._method: str | None = DEFAULT_METHOD
        if settings is not None:
            self._port = settings.default_port
            self._http_version = settings.default_http_version
            self._method = settings.default_method
        self._path: str | None = None
        self._headers: dict[str, str] = dict(DEFAULT_HEADERS)
        self._body: str | None = None
        self._uri_error: BuilderError | None = None

    def host(self, host: str | None) -> Builder:
        self._host = host
        return self

    def port(self, port: int | None) -> Builder:
        self._port = port
        return self

    def http_version(self, http_version: str | None) -> Builder:
        self._http_version = http_version
        return self

    def method(self, method: str | None) -> Builder:
        self._method = method
        return self

    def path(self, path: str | None) -> Builder:
        self._path = path
        return self

    def header(self, key: str, value: str) -> Builder:
        self._headers[key] = value
        return self

    def remove_header(self, key: str) -> Builder:
        self._headers.pop(key, None)
        return self

    def clear_headers(self) -> Builder:
        self._headers.clear()
        return self

    def body(self, body: str | None) -> Builder:
        self._body = body
        return self

    def uri(self, uri: str) -> Builder:
        """Set host, path and (when present) port from ``http://host[/path][:port]``.

        A port that is not an unsigned 16-bit integer is kept as a pending error
        and raised by build(); a later successful uri() call clears it.
        """
        try:
            parsed = parse_uri(uri)
        except BuilderError as exc:
            logger.warning("uri parse failed: {}", exc)
            self._uri_error = exc
            return self

        self._uri_error = None
        self._host = parsed.host
        self._path = parsed.path
        if parsed.port is not None:
            self._port = parsed.port
        return self

    def build(self) -> Request:
        if self._uri_error is not None:
            raise BuilderError(self._uri_error.message)
        if self._host is None:
            raise BuilderError("host is required")
        if self._method is None:
            raise BuilderError("method is required")
        if self._path is None:
            raise BuilderError("path is required")
        if not self._headers:
            raise BuilderError("headers are required")
        if self._port is None or not 0 <= self._port <= MAX_PORT:
            raise BuilderError(f"port must be between 0 and {MAX_PORT}")
        if self._http_version is None:
            raise BuilderError("http version is required")

        request = Request(
            method=self._method,
            path=self._path,
            headers=dict(self._headers),
            body=self._body if self._body is not None else "",
            host=self._host,
            port=self._port,
            http_version=self._http_version,
        )
        _log("request_built", method=request.method, host=request.host, port=request.port, path=request.path)
        return request
