"""Client error hierarchy.

BuilderError is raised while freezing a Builder into a Request. RequestError
covers transport failures during send, and ResponseError (a RequestError) covers
responses that could not be parsed, so callers of send() can catch RequestError
alone.
"""
from __future__ import annotations


class HttpClientError(Exception):
    """Base for all client failures; carries a descriptive message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BuilderError(HttpClientError):
    """Raised when a Builder is missing a field or holds an invalid one."""


class RequestError(HttpClientError):
    """Raised when connecting, writing or reading fails during send."""


class ResponseError(RequestError):
    """Raised when the raw response is not a well-formed HTTP response."""
