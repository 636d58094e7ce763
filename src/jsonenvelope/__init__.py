"""
jsonenvelope: JSON response envelope for request handlers.
Status, messages, field errors, debug data, redirect and payload serialized as one object.
"""
from jsonenvelope.core import (
    BufferedOutput,
    CatalogTranslator,
    EnvelopeSettings,
    ResponseEnvelope,
    ResponseTerminated,
    SerializationError,
    load_settings,
    send,
    send_with_settings,
)

__all__ = [
    "BufferedOutput",
    "CatalogTranslator",
    "EnvelopeSettings",
    "ResponseEnvelope",
    "ResponseTerminated",
    "SerializationError",
    "load_settings",
    "send",
    "send_with_settings",
]
