"""Weakly-typed view over a parsed JSON-LD document.

Validators never assume a fixed shape: every lookup returns None when a key
is absent or when an intermediate value is not an object.
"""

from typing import Any, Iterator, Optional


def is_present(value: Any) -> bool:
    """Whether a property value counts as supplied.

    ``None``, ``False``, ``0`` and the empty string are treated as missing.
    Empty lists and objects are present.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


class JsonLdDocument:
    """A parsed JSON-LD object with absent-safe accessors."""

    def __init__(self, data: Any):
        # Non-object documents (arrays, scalars) have no properties
        self._data = data if isinstance(data, dict) else {}

    @property
    def data(self) -> dict:
        return self._data

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def has(self, key: str) -> bool:
        return is_present(self._data.get(key))

    def lookup(self, path: str) -> Any:
        """Resolve a dotted path such as ``contactPoint.telephone``."""
        current: Any = self._data
        for part in path.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
        return current

    def string(self, key: str) -> Optional[str]:
        """The value of ``key`` if it is a string, else None."""
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def string_items(self) -> Iterator[tuple]:
        """Yield ``(key, value)`` for every top-level string property."""
        for key, value in self._data.items():
            if isinstance(value, str):
                yield key, value

    @property
    def types(self) -> list:
        """The document's ``@type`` values as a list of strings."""
        value = self._data.get("@type")
        if isinstance(value, str):
            return [value] if value else []
        if isinstance(value, list):
            return [t for t in value if isinstance(t, str) and t]
        return []

    @property
    def primary_type(self) -> Optional[str]:
        types = self.types
        return types[0] if types else None
