"""Node - A named graph vertex with attributes."""

from __future__ import annotations

from dataclasses import dataclass

from attrgraph.attributes import AttributeMap, AttributesContainer, attributes_field, to_attr_str


@dataclass
class Node(AttributesContainer):
    """A node identified by its name.

    The name is the node's identity within a Graph. Uniqueness is not
    enforced here; see ``Graph.get_node`` for lookup semantics.

    Attributes:
        name: Node identity.
        attrs: Attribute store.
    """

    name: str
    attrs: AttributeMap = attributes_field()

    def __post_init__(self) -> None:
        self.name = to_attr_str(self.name)
