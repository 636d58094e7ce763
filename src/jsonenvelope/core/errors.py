"""Exceptions raised by the envelope and its send path."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonenvelope.core.envelope import ResponseEnvelope


class EnvelopeError(Exception):
    """Base error for jsonenvelope."""


class SerializationError(EnvelopeError, TypeError):
    """Payload (or debug) value cannot be represented as JSON."""


class ResponseTerminated(EnvelopeError):
    """
    Raised by send(..., exit=True) once the body is written.
    Host code catches it to stop any further request processing.
    """

    def __init__(self, envelope: ResponseEnvelope) -> None:
        super().__init__("response sent; request processing terminated")
        self.envelope = envelope
