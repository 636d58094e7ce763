"""
Sending an envelope through the host's output primitives.
Order: discard buffered output -> headers (if not sent yet) -> body -> optional termination.
"""
from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from jsonenvelope.core.config import EnvelopeSettings, load_settings
from jsonenvelope.core.envelope import ResponseEnvelope
from jsonenvelope.core.errors import ResponseTerminated
from jsonenvelope.core.responses import Response, envelope_headers

logger = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Host output: buffered body, header emission, body write. User implements (WSGI, CGI, tests)."""

    @property
    def headers_sent(self) -> bool:
        ...

    def discard_buffer(self) -> None:
        ...

    def set_header(self, name: str, value: str) -> None:
        ...

    def write(self, body: bytes) -> None:
        ...


class BufferedOutput:
    """In-memory OutputSink. Headers are considered sent after the first body write or flush_headers()."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._body = bytearray()
        self._headers: dict[str, str] = {}
        self._headers_sent = False

    @property
    def headers_sent(self) -> bool:
        return self._headers_sent

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def body(self) -> bytes:
        return bytes(self._buffer) + bytes(self._body)

    def buffer(self, chunk: bytes | str) -> None:
        """Stray output produced during request processing; dropped by discard_buffer()."""
        self._buffer += chunk if isinstance(chunk, bytes) else chunk.encode()

    def discard_buffer(self) -> None:
        self._buffer.clear()

    def flush_headers(self) -> None:
        self._headers_sent = True

    def set_header(self, name: str, value: str) -> None:
        if self._headers_sent:
            raise RuntimeError(f"cannot set header {name!r}: headers already sent")
        self._headers[name] = value

    def write(self, body: bytes) -> None:
        self._headers_sent = True
        self._body += body

    def to_response(self, status_code: int = 200) -> Response:
        return Response(
            self.body,
            media_type=self._headers.get("Content-Type"),
            status_code=status_code,
            headers=self._headers,
        )


def send(
    envelope: ResponseEnvelope,
    output: OutputSink,
    *,
    exit: bool = True,
    avoid_cache: bool = True,
    content_type: str | None = "application/json",
    debug: bool = False,
    protect_reserved: bool = False,
) -> None:
    """
    Write the envelope as the full response body.
    content_type=None suppresses the Content-Type header. No headers are set when the
    host already sent them. With exit=True, ResponseTerminated is raised after writing.
    """
    body = envelope.to_bytes(debug, protect_reserved=protect_reserved)
    output.discard_buffer()
    if output.headers_sent:
        logger.debug("headers already sent; writing envelope body only")
    else:
        for name, value in envelope_headers(content_type, avoid_cache).items():
            output.set_header(name, value)
    output.write(body)
    if exit:
        logger.debug("envelope sent; terminating request processing")
        raise ResponseTerminated(envelope)


def send_with_settings(
    envelope: ResponseEnvelope,
    output: OutputSink,
    settings: EnvelopeSettings | None = None,
) -> None:
    """send() configured from settings; without settings they are loaded from the environment."""
    if settings is None:
        settings = load_settings()
    send(
        envelope,
        output,
        exit=settings.exit_after_send,
        avoid_cache=settings.avoid_cache,
        content_type=settings.content_type,
        debug=settings.debug,
        protect_reserved=settings.protect_reserved,
    )
