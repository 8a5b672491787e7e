"""Edge - A connection between two node names."""

from __future__ import annotations

from dataclasses import dataclass

from attrgraph.attributes import AttributeMap, AttributesContainer, attributes_field, to_attr_str


@dataclass
class Edge(AttributesContainer):
    """An edge between the nodes named ``a`` and ``b``.

    Endpoints are stored in the order given and compared positionally, so
    ``Edge("a", "b") != Edge("b", "a")``. Endpoints are names only; nothing
    checks that a node with that name exists.

    Attributes:
        a: First endpoint name.
        b: Second endpoint name.
        attrs: Attribute store.
    """

    a: str
    b: str
    attrs: AttributeMap = attributes_field()

    def __post_init__(self) -> None:
        self.a = to_attr_str(self.a)
        self.b = to_attr_str(self.b)

    def __str__(self) -> str:
        return f"{self.a} -- {self.b}"
