"""URI parsing for the request builder.

Accepted shapes are ``http://host``, ``http://host/``, ``http://host/path`` and
``http://host/path:port``. Only a literal ``http://`` prefix is stripped; query
strings and fragments stay in the path untouched.
"""
from __future__ import annotations

from dataclasses import dataclass

from httpclient.app.constants import HTTP_SCHEME_PREFIX, MAX_PORT
from httpclient.app.domain.errors import BuilderError


@dataclass(frozen=True)
class ParsedUri:
    """Host, path and optional port pulled out of a URI string."""

    host: str
    path: str
    port: int | None = None


def parse_uri(uri: str) -> ParsedUri:
    remainder = uri.removeprefix(HTTP_SCHEME_PREFIX)
    host, slash, path = remainder.partition("/")
    if not slash:
        return ParsedUri(host=host, path="/")

    port: int | None = None
    if ":" in path:
        path, _, port_text = path.partition(":")
        port = _parse_port(port_text)

    return ParsedUri(host=host, path=_ensure_leading_slash(path), port=port)


def _parse_port(port_text: str) -> int:
    if not (port_text.isascii() and port_text.isdigit()):
        raise BuilderError(f"invalid port in uri: {port_text!r}")
    port = int(port_text)
    if port > MAX_PORT:
        raise BuilderError(f"invalid port in uri: {port_text!r}")
    return port


def _ensure_leading_slash(path: str) -> str:
    if path.startswith("/"):
        return path
    return "/" + path
