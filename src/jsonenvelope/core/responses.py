"""Minimal response types: body bytes, media type, status and headers."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jsonenvelope.core.envelope import ResponseEnvelope

NO_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache, must-revalidate",
    "Expires": "Sat, 26 Jul 1997 05:00:00 GMT",
}


def envelope_headers(content_type: str | None = "application/json", avoid_cache: bool = True) -> dict[str, str]:
    """Headers sent with an envelope: content type (unless None) and cache avoidance."""
    headers: dict[str, str] = {}
    if content_type is not None:
        headers["Content-Type"] = content_type
    if avoid_cache:
        headers.update(NO_CACHE_HEADERS)
    return headers


class Response:
    """Response with .body (bytes), .status_code and .headers."""

    def __init__(
        self,
        content: bytes | str,
        media_type: str | None = "application/json",
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.body = content if isinstance(content, bytes) else content.encode()
        self.media_type = media_type
        self.status_code = status_code
        self.headers: dict[str, str] = dict(headers or {})

    def json(self) -> Any:
        return json.loads(self.body)


class EnvelopeResponse(Response):
    """Serialized envelope plus the same headers send() would emit."""

    def __init__(
        self,
        envelope: ResponseEnvelope,
        *,
        debug: bool = False,
        avoid_cache: bool = True,
        status_code: int = 200,
        content_type: str | None = "application/json",
        protect_reserved: bool = False,
    ) -> None:
        super().__init__(
            envelope.to_bytes(debug, protect_reserved=protect_reserved),
            media_type=content_type,
            status_code=status_code,
            headers=envelope_headers(content_type, avoid_cache),
        )
        self.envelope = envelope
