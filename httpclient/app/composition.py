"""Client composition root: build concrete dependencies from settings.

Composition may: import concrete classes, call factories, store interface types.
"""
from __future__ import annotations

from loguru import logger
from pydantic import ValidationError

from httpclient.app.config.settings import ClientSettings
from httpclient.app.domain.errors import RequestError
from httpclient.app.infrastructure.transport.factory import create_transport
from httpclient.app.ports.transport import Transport


class ClientDependencies:
    """Holds wired client dependencies."""

    def __init__(self, *, settings: ClientSettings) -> None:
        self._settings = settings
        self._transport: Transport | None = None

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = create_transport(self._settings)
        return self._transport


def create_client_dependencies(settings: ClientSettings | None = None) -> ClientDependencies:
    return ClientDependencies(settings=settings or ClientSettings())


def default_transport() -> Transport:
    """Transport for Request.send() without an explicit one; settings come from the environment."""
    try:
        deps = create_client_dependencies()
        return deps.transport
    except (ValidationError, ValueError) as exc:
        logger.warning("client settings invalid: {}", exc)
        raise RequestError("invalid client settings") from exc
