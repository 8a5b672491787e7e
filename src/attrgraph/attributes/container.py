"""AttributesContainer - The "has attributes" capability.

An entity gains ``get_attr`` and ``with_attrs`` by subclassing
``AttributesContainer`` and designating one of its fields as its attribute
store. The designation is made once per class, either with the
``attributes_field()`` marker:

    @dataclass
    class Node(AttributesContainer):
        name: str
        attrs: AttributeMap = attributes_field()

or with a class keyword naming an annotated field assigned in ``__init__``:

    class Tagged(AttributesContainer, attributes="tags"):
        tags: AttributeMap

        def __init__(self):
            self.tags = AttributeMap()

The designation is resolved while the class is being created. A class that
claims the capability without a designated field, or names a field it
never declares, is rejected with ``TypeError`` before it exists. A class
that uses the marker without becoming a dataclass cannot be instantiated.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from typing import Any, TypeVar

from attrgraph.attributes.store import AttributeMap, AttributePairs, StrLike

logger = logging.getLogger(__name__)

ATTRIBUTES_MARKER = "attrgraph.attributes"

C = TypeVar("C", bound="AttributesContainer")


def attributes_field(**kwargs: Any) -> Any:
    """Declare a dataclass field as the entity's attribute store.

    Behaves like ``dataclasses.field`` with an empty ``AttributeMap``
    default; extra keyword arguments are passed through.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ATTRIBUTES_MARKER] = True
    if "default" not in kwargs:
        kwargs.setdefault("default_factory", AttributeMap)
    return dataclasses.field(metadata=metadata, **kwargs)


def _declares(cls: type, name: str) -> bool:
    """True if ``name`` is annotated on ``cls`` or one of its bases."""
    for klass in cls.__mro__:
        if klass is object:
            continue
        if name in inspect.get_annotations(klass):
            return True
    return False


def _marked_fields(cls: type) -> list[str]:
    """Names of fields declared with ``attributes_field()`` in ``cls`` itself."""
    return [
        name
        for name, value in vars(cls).items()
        if isinstance(value, dataclasses.Field) and value.metadata.get(ATTRIBUTES_MARKER)
    ]


class AttributesContainer:
    """Capability mixin for entities that carry an ``AttributeMap``.

    ``get_attr`` and ``with_attrs`` behave exactly like ``get`` and
    ``extend`` on the designated field.
    """

    __slots__ = ()

    __attributes_field__: str = ""

    def __init_subclass__(cls, attributes: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        marked = _marked_fields(cls)
        if len(marked) > 1:
            raise TypeError(
                f"{cls.__qualname__} marks more than one attribute store: {', '.join(marked)}"
            )
        if marked and attributes is not None and attributes != marked[0]:
            raise TypeError(
                f"{cls.__qualname__} designates '{attributes}' as its attribute store "
                f"but marks '{marked[0]}' with attributes_field()"
            )

        designated = attributes or (marked[0] if marked else "") or cls.__attributes_field__
        if not designated:
            raise TypeError(
                f"{cls.__qualname__} is an AttributesContainer but has no attribute store; "
                "declare a field with attributes_field() or pass attributes='<field>'"
            )
        if attributes is not None and not _declares(cls, attributes):
            raise TypeError(
                f"{cls.__qualname__} designates '{attributes}' as its attribute store "
                f"but declares no '{attributes}: AttributeMap' field"
            )

        cls.__attributes_field__ = designated
        logger.debug("%s stores attributes in '%s'", cls.__qualname__, designated)

    def __new__(cls, *args: Any, **kwargs: Any) -> AttributesContainer:
        # @dataclass replaces the marker; a surviving Field means it never ran.
        if isinstance(getattr(cls, cls.__attributes_field__, None), dataclasses.Field):
            raise TypeError(
                f"{cls.__qualname__} marks '{cls.__attributes_field__}' with "
                "attributes_field() but is not a dataclass"
            )
        return super().__new__(cls)

    def _attribute_store(self) -> AttributeMap:
        return getattr(self, self.__attributes_field__)

    def get_attr(self, name: StrLike) -> str | None:
        """Return the attribute value for ``name``, or None if unset."""
        return self._attribute_store().get(name)

    def with_attrs(self: C, pairs: AttributePairs) -> C:
        """Merge ``pairs`` into the attribute store and return self.

        Args:
            pairs: ``(name, value)`` pairs; later pairs win.

        Returns:
            This entity, for chaining.
        """
        self._attribute_store().extend(pairs)
        return self
