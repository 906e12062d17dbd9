"""Wire-level constants shared across modules."""
from __future__ import annotations

CRLF = "\r\n"
HEADER_BODY_SEPARATOR = "\r\n\r\n"
HEADER_SEPARATOR = ": "
HTTP_SCHEME_PREFIX = "http://"

CONTENT_LENGTH_HEADER = "Content-Length"
DEFAULT_HEADERS: dict[str, str] = {"Connection": "close"}

MAX_PORT = 65535

DEFAULT_PORT = 80
DEFAULT_HTTP_VERSION = "1.1"
DEFAULT_METHOD = "GET"
