"""Response parser: raw bytes read from the transport into a Response.

Every malformed input raises ResponseError; nothing here guesses a default for
a field it could not read.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from httpclient.app.constants import CRLF, HEADER_BODY_SEPARATOR, HEADER_SEPARATOR
from httpclient.app.domain.errors import ResponseError
from httpclient.app.domain.response import Response
from httpclient.app.domain.status_code import StatusCode

if TYPE_CHECKING:
    from httpclient.app.domain.request import Request


def parse_response(raw: bytes, request: Request) -> Response:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ResponseError("malformed response: not valid UTF-8") from exc

    head, separator, body = text.partition(HEADER_BODY_SEPARATOR)
    if not separator:
        raise ResponseError("malformed response: missing header/body separator")

    status_line, *header_lines = head.split(CRLF)
    return Response(
        status_code=parse_status_line(status_line),
        raw_response=text,
        headers=parse_header_lines(header_lines),
        body=body,
        request_used=request.snapshot(),
    )


def parse_status_line(status_line: str) -> StatusCode:
    tokens = status_line.split(" ")
    if len(tokens) < 2:
        raise ResponseError(f"malformed response: bad status line {status_line!r}")
    code_text = tokens[1]
    if not (code_text.isascii() and code_text.isdigit()):
        raise ResponseError(f"malformed response: bad status code {code_text!r}")
    return StatusCode.from_code(int(code_text))


def parse_header_lines(lines: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for line in lines:
        key, separator, value = line.partition(HEADER_SEPARATOR)
        if not separator:
            raise ResponseError(f"malformed response: bad header line {line!r}")
        # last occurrence wins
        headers[key] = value
    return headers
