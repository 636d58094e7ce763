"""
Starlette integration: envelope -> starlette Response, per-request envelope endpoints,
and a route group (one object per context, routes attached to it).
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from jsonenvelope.core.config import EnvelopeSettings
from jsonenvelope.core.envelope import ResponseEnvelope
from jsonenvelope.core.errors import ResponseTerminated
from jsonenvelope.core.responses import envelope_headers
from jsonenvelope.core.translator import MessageResolver

logger = logging.getLogger(__name__)

EnvelopeHandler = Callable[[Request, ResponseEnvelope], Any]


def envelope_response(
    envelope: ResponseEnvelope,
    settings: EnvelopeSettings | None = None,
    status_code: int = 200,
) -> Response:
    """Serialized envelope with content type and cache avoidance headers from settings."""
    settings = settings or EnvelopeSettings()
    body = envelope.to_bytes(settings.debug, protect_reserved=settings.protect_reserved)
    return Response(
        body,
        status_code=status_code,
        headers=envelope_headers(None, settings.avoid_cache),
        media_type=settings.content_type,
    )


async def _call_handler(handler: EnvelopeHandler, request: Request, envelope: ResponseEnvelope) -> Any:
    result = handler(request, envelope)
    if hasattr(result, "__await__"):
        return await result
    return result


def json_endpoint(
    handler: EnvelopeHandler,
    settings: EnvelopeSettings | None = None,
    resolver: MessageResolver | None = None,
) -> Callable[[Request], Any]:
    """
    Wrap handler(request, envelope) into a Starlette endpoint. Each call gets a fresh envelope.
    Raising ResponseTerminated in the handler stops it early; the envelope is still sent.
    A handler returning a starlette Response short-circuits the envelope.
    """

    async def endpoint(request: Request) -> Response:
        envelope = ResponseEnvelope(resolver)
        try:
            result = await _call_handler(handler, request, envelope)
        except ResponseTerminated as exc:
            logger.debug("handler terminated early for %s %s", request.method, request.url.path)
            envelope = exc.envelope
            result = None
        if isinstance(result, Response):
            return result
        return envelope_response(envelope, settings)

    return endpoint


class EnvelopeRoutes:
    """
    Route group: name + envelope handlers.
    Mount via Starlette(routes=group.routes()).
    """

    def __init__(
        self,
        name: str,
        prefix: str | None = None,
        settings: EnvelopeSettings | None = None,
        resolver: MessageResolver | None = None,
    ) -> None:
        self.name = name
        self.prefix = prefix if prefix is not None else f"/{name}"
        self._settings = settings
        self._resolver = resolver
        self._routes: list[tuple[str, EnvelopeHandler, list[str]]] = []

    def route(self, path: str, handler: EnvelopeHandler, methods: list[str] | None = None) -> EnvelopeRoutes:
        """Add a route. path without leading slash is under the group prefix."""
        if methods is None:
            methods = ["GET"]
        p = path if path.startswith("/") else f"/{path}"
        self._routes.append((p, handler, methods))
        return self

    def routes(self) -> list[Route]:
        out: list[Route] = []
        for path, handler, methods in self._routes:
            full_path = self.prefix.rstrip("/") + path
            out.append(
                Route(
                    full_path,
                    json_endpoint(handler, self._settings, self._resolver),
                    methods=methods,
                    name=f"{self.name}:{handler.__name__}" if hasattr(handler, "__name__") else None,
                )
            )
        return out
