"""ResponseEnvelope: status, messages, field errors, debug data, redirect and payload in one JSON object."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from jsonenvelope.core.errors import SerializationError
from jsonenvelope.core.translator import MessageResolver, identity_resolver

logger = logging.getLogger(__name__)

# Order matters: payload entries are merged after these.
RESERVED_KEYS = (
    "success",
    "successMessage",
    "errorMessage",
    "fieldErrors",
    "redirect",
    "debug",
)


class ResponseEnvelope:
    """
    Response built up by a request handler and sent back as a single JSON document.

    The last of mark_success()/mark_error() decides the status. Payload fields are
    set with set_data_field()/populate() and merged into the top level of the
    output, after the reserved keys: a payload key named like a reserved key
    replaces the reserved value unless protect_reserved=True is passed.
    """

    def __init__(self, resolver: MessageResolver | None = None) -> None:
        self._resolve = resolver or identity_resolver
        self._success = True
        self._success_message: str | None = None
        self._error_message: str | None = None
        self._field_errors: dict[str, str] = {}
        self._data: dict[str, Any] = {}
        self._debug: dict[str, Any] = {}
        self._redirect: str | None = None

    # Payload

    def set_data_field(self, name: str, value: Any) -> None:
        self._data[name] = value

    def get_data_field(self, name: str) -> Any:
        """Payload value, or None if the field is not set."""
        return self._data.get(name)

    def has_data_field(self, name: str) -> bool:
        return name in self._data

    def populate(self, data: Mapping[str, Any]) -> None:
        """Replace the payload with data; all previous payload fields are lost."""
        self._data = dict(data)

    def get_all_data(self) -> dict[str, Any]:
        """Copy of the payload."""
        return dict(self._data)

    def reset_data(self) -> None:
        self._data = {}

    # Status

    def mark_success(self, message: str | None = None) -> None:
        """
        Set the state to success. message may be a translation key; it is resolved
        before storing. Clears the error message.
        """
        if message:
            self._success_message = self._resolve(message)
        self._success = True
        self._error_message = None

    def mark_error(
        self,
        message: str | None = None,
        field_errors: Mapping[str, str] | None = None,
    ) -> None:
        """
        Set the state to failure. message may be a translation key. field_errors
        (field name -> message) are merged into the ones already collected.
        Clears the success message.
        """
        if message:
            self._error_message = self._resolve(message)
        if field_errors:
            self._field_errors.update(field_errors)
        self._success = False
        self._success_message = None

    def add_debug(self, value: Any, title: str | None = None) -> None:
        """Attach a debug value. Without a title it is stored as "Debug #N"."""
        if title is None:
            title = f"Debug #{len(self._debug) + 1}"
        self._debug[title] = value

    def request_redirect(self, url: str) -> None:
        """Ask the client to navigate to url."""
        self._redirect = url

    # Accessors

    def get_success_message(self) -> str | None:
        return self._success_message

    def get_error_message(self) -> str | None:
        return self._error_message

    @property
    def success(self) -> bool:
        return self._success

    @property
    def field_errors(self) -> dict[str, str]:
        return dict(self._field_errors)

    @property
    def debug_entries(self) -> dict[str, Any]:
        return dict(self._debug)

    @property
    def redirect_url(self) -> str | None:
        return self._redirect

    # Serialization

    def to_dict(self, debug: bool = False, *, protect_reserved: bool = False) -> dict[str, Any]:
        """
        Merged output object. debug=False always yields "debug": {}.
        Payload keys override reserved keys unless protect_reserved is set.
        """
        reserved: dict[str, Any] = {
            "success": self._success,
            "successMessage": self._success_message,
            "errorMessage": self._error_message,
            "fieldErrors": dict(self._field_errors),
            "redirect": self._redirect,
            "debug": dict(self._debug) if debug else {},
        }
        collisions = [key for key in self._data if key in RESERVED_KEYS]
        if collisions:
            logger.debug(
                "payload keys %s collide with reserved keys; %s value kept",
                collisions,
                "reserved" if protect_reserved else "payload",
            )
        if protect_reserved:
            return {**reserved, **{k: v for k, v in self._data.items() if k not in RESERVED_KEYS}}
        return {**reserved, **self._data}

    def to_json(self, debug: bool = False, *, protect_reserved: bool = False) -> str:
        """Serialize to a JSON object string. Pure; can be called repeatedly."""
        content = self.to_dict(debug, protect_reserved=protect_reserved)
        try:
            return json.dumps(content, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"envelope is not JSON serializable: {exc}") from exc

    def to_bytes(self, debug: bool = False, *, protect_reserved: bool = False) -> bytes:
        """UTF-8 encoded to_json()."""
        return self.to_json(debug, protect_reserved=protect_reserved).encode("utf-8")

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return (
            f"ResponseEnvelope(success={self._success!r}, "
            f"fields={sorted(self._data)!r}, redirect={self._redirect!r})"
        )
