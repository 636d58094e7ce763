from jsonenvelope.core.envelope import RESERVED_KEYS, ResponseEnvelope
from jsonenvelope.core.errors import EnvelopeError, ResponseTerminated, SerializationError
from jsonenvelope.core.translator import CatalogTranslator, MessageResolver, identity_resolver
from jsonenvelope.core.responses import EnvelopeResponse, Response
from jsonenvelope.core.transport import BufferedOutput, OutputSink, send, send_with_settings
from jsonenvelope.core.config import EnvelopeSettings, load_settings

__all__ = [
    "RESERVED_KEYS",
    "ResponseEnvelope",
    "EnvelopeError",
    "ResponseTerminated",
    "SerializationError",
    "CatalogTranslator",
    "MessageResolver",
    "identity_resolver",
    "EnvelopeResponse",
    "Response",
    "BufferedOutput",
    "OutputSink",
    "send",
    "send_with_settings",
    "EnvelopeSettings",
    "load_settings",
]
