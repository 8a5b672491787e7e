"""Graph - Aggregate of nodes and edges with builder-style construction.

Nodes and edges are kept in insertion order. The builders only append;
there is no removal. The graph does not check that edge endpoints name
nodes it contains.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from attrgraph.attributes import AttributeMap, AttributesContainer, attributes_field, to_attr_str
from attrgraph.attributes.store import StrLike
from attrgraph.graph.edge import Edge
from attrgraph.graph.node import Node

logger = logging.getLogger(__name__)


@dataclass
class Graph(AttributesContainer):
    """A graph owning its nodes, edges and attributes.

    Example:
        >>> graph = Graph().with_nodes([Node("a"), Node("b")]).with_edges([Edge("a", "b")])
        >>> len(graph.nodes), len(graph.edges)
        (2, 1)
        >>> graph.get_node("c") is None
        True

    Attributes:
        nodes: Nodes in insertion order.
        edges: Edges in insertion order.
        attrs: Graph-level attribute store.
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    attrs: AttributeMap = attributes_field()

    def with_nodes(self, nodes: Iterable[Node]) -> Graph:
        """Append copies of ``nodes`` and return self.

        Args:
            nodes: Nodes to add, in order. The caller keeps its own objects.

        Returns:
            This graph, for chaining.
        """
        added = [copy.deepcopy(node) for node in nodes]
        self.nodes.extend(added)
        logger.debug("Added %d node(s), graph now has %d", len(added), len(self.nodes))
        return self

    def with_edges(self, edges: Iterable[Edge]) -> Graph:
        """Append copies of ``edges`` and return self.

        Args:
            edges: Edges to add, in order. The caller keeps its own objects.

        Returns:
            This graph, for chaining.
        """
        added = [copy.deepcopy(edge) for edge in edges]
        self.edges.extend(added)
        logger.debug("Added %d edge(s), graph now has %d", len(added), len(self.edges))
        return self

    def get_node(self, name: StrLike) -> Node | None:
        """Find a node by name.

        Returns the first node with a matching name if several share it.

        Args:
            name: Node name to look up.

        Returns:
            The node, or None if no node has that name.
        """
        name = to_attr_str(name)
        for node in self.nodes:
            if node.name == name:
                return node
        return None
