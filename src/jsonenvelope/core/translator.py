"""Message resolution: turn a message or translation key into a display string."""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class MessageResolver(Protocol):
    """Resolve a translation key. Returns the key itself (or an equivalent) when untranslated."""

    def __call__(self, key: str) -> str:
        ...


def identity_resolver(key: str) -> str:
    """Default resolver: messages are used verbatim."""
    return key


class CatalogTranslator:
    """
    Lookup in a flat key -> text catalog.
    Instances are callable, so they can be passed wherever a MessageResolver is expected.
    """

    def __init__(self, catalog: Mapping[str, str] | None = None) -> None:
        self._catalog: dict[str, str] = dict(catalog or {})

    def add(self, key: str, text: str) -> CatalogTranslator:
        self._catalog[key] = text
        return self

    def has(self, key: str) -> bool:
        return key in self._catalog

    def get_if_exists(self, key: str) -> str:
        """Translation for key if the catalog has one, else the key itself."""
        return self._catalog.get(key, key)

    def __call__(self, key: str) -> str:
        return self.get_if_exists(key)
