"""Graph module - Entity types.

Exports:
- Node: Named vertex with attributes
- Edge: Connection between two node names, with attributes
- Graph: Aggregate of nodes and edges, with attributes
- graph_items: Namespace holding the node and edge item modules
"""

from attrgraph.graph import graph_items
from attrgraph.graph.edge import Edge
from attrgraph.graph.graph import Graph
from attrgraph.graph.node import Node

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "graph_items",
]
