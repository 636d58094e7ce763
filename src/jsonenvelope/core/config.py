"""Settings from the environment: debug output, content type, cache avoidance, termination."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean (1/0, true/false, yes/no, on/off), got {value!r}")


@dataclass(frozen=True)
class EnvelopeSettings:
    """
    How envelopes are serialized and sent.
    debug replaces a process-wide debug flag: it is passed explicitly into serialization.
    """

    debug: bool = False
    content_type: str | None = "application/json"
    avoid_cache: bool = True
    exit_after_send: bool = True
    protect_reserved: bool = False


def load_settings(prefix: str = "JSONENVELOPE_", **defaults: Any) -> EnvelopeSettings:
    """Build EnvelopeSettings from environment variables (prefix + field name, upper case)."""
    raw = dict(defaults)
    for key, value in os.environ.items():
        if key.startswith(prefix):
            raw[key[len(prefix):].lower()] = value
    kwargs: dict[str, Any] = {}
    for name in ("debug", "avoid_cache", "exit_after_send", "protect_reserved"):
        if name in raw:
            kwargs[name] = parse_bool(f"{prefix}{name.upper()}", raw[name])
    if "content_type" in raw:
        # Empty value suppresses the Content-Type header.
        kwargs["content_type"] = raw["content_type"] or None
    return EnvelopeSettings(**kwargs)
