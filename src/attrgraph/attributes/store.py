"""AttributeMap - String key/value storage shared by every graph entity.

This module provides:
- AttributeMap: Mapping from attribute name to attribute value
- to_attr_str: Coercion of string-like input to ``str``
"""

from __future__ import annotations

from collections import UserString
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

StrLike = Union[str, UserString, bytes, bytearray]
AttributePairs = Union[Iterable[tuple[StrLike, StrLike]], Mapping[StrLike, StrLike]]


def to_attr_str(value: Any) -> str:
    """Convert a string-like value to ``str``.

    Accepts ``str`` (and subclasses), ``UserString`` and UTF-8 encoded
    ``bytes``/``bytearray``.

    Raises:
        TypeError: If the value is not string-like, or is bytes that are
            not valid UTF-8.
    """
    if isinstance(value, str):
        return str(value)
    if isinstance(value, UserString):
        return value.data
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TypeError(f"expected UTF-8 encoded bytes: {exc}") from exc
    raise TypeError(f"expected a string-like value, got {type(value).__name__}")


class AttributeMap(Mapping[str, str]):
    """Attribute name to attribute value mapping.

    Keys are unique; setting an existing key replaces its value. Equality
    ignores insertion order and also holds against plain mappings with the
    same contents, so ``AttributeMap([("a", "1")]) == {"a": "1"}``.

    Example:
        >>> attrs = AttributeMap()
        >>> attrs.extend([("color", "red"), ("shape", "box")])
        >>> attrs.get("color")
        'red'
        >>> attrs.get("missing") is None
        True
    """

    __slots__ = ("_values",)

    def __init__(self, pairs: AttributePairs | None = None) -> None:
        self._values: dict[str, str] = {}
        if pairs is not None:
            self.extend(pairs)

    def get(self, name: StrLike, default: str | None = None) -> str | None:
        """Return the value stored under ``name``, or ``default`` if absent."""
        return self._values.get(to_attr_str(name), default)

    def set(self, name: StrLike, value: StrLike) -> None:
        """Insert or overwrite a single attribute."""
        self._values[to_attr_str(name)] = to_attr_str(value)

    def extend(self, pairs: AttributePairs) -> None:
        """Insert every ``(name, value)`` pair, in order.

        Later pairs overwrite earlier ones with the same name, and all of
        them overwrite values already in the map. ``pairs`` is only read.

        Args:
            pairs: A list or tuple of 2-tuples, any iterable of 2-tuples,
                or a mapping.
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for name, value in items:
            self.set(name, value)

    def is_empty(self) -> bool:
        """True if no attributes are stored."""
        return not self._values

    def copy(self) -> AttributeMap:
        """Return an independent copy of this map."""
        clone = AttributeMap()
        clone._values = dict(self._values)
        return clone

    def __getitem__(self, name: StrLike) -> str:
        return self._values[to_attr_str(name)]

    def __contains__(self, name: object) -> bool:
        try:
            return to_attr_str(name) in self._values
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeMap):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> AttributeMap:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> AttributeMap:
        # Keys and values are immutable strings.
        return self.copy()

    def __repr__(self) -> str:
        return f"AttributeMap({self._values!r})"
