"""Renders a Request into HTTP/1.1 wire bytes."""
from __future__ import annotations

from typing import TYPE_CHECKING

from httpclient.app.constants import CONTENT_LENGTH_HEADER, CRLF, HEADER_SEPARATOR
from httpclient.app.domain.errors import RequestError

if TYPE_CHECKING:
    from httpclient.app.domain.request import Request


def headers_with_content_length(request: Request, body_length: int) -> dict[str, str]:
    """Copy of the request headers with Content-Length added unless the caller set one."""
    headers = dict(request.headers)
    if CONTENT_LENGTH_HEADER not in headers:
        headers[CONTENT_LENGTH_HEADER] = str(body_length)
    return headers


def serialize_request(request: Request) -> bytes:
    """Request line, Host header, request headers in insertion order, blank line, body."""
    try:
        body = request.body.encode("utf-8")
        headers = headers_with_content_length(request, len(body))
        header_lines = "".join(f"{key}{HEADER_SEPARATOR}{value}{CRLF}" for key, value in headers.items())
        head = (
            f"{request.method} {request.path} HTTP/{request.http_version}{CRLF}"
            f"Host: {request.host}{CRLF}"
            f"{header_lines}{CRLF}"
        )
        return head.encode("utf-8") + body
    except UnicodeEncodeError as exc:
        raise RequestError("could not encode request") from exc
