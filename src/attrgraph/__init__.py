"""
attrgraph - In-memory graph data model with string attributes

Nodes, edges and graphs all carry an attribute map and share one
"has attributes" capability (``get_attr`` / ``with_attrs``). Graphs are
assembled with chained builder calls:

    Graph().with_nodes([Node("a"), Node("b")]).with_edges([Edge("a", "b")])
"""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("attrgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed

from attrgraph.attributes import AttributeMap, AttributesContainer, attributes_field
from attrgraph.graph import Edge, Graph, Node, graph_items

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "AttributeMap",
    "AttributesContainer",
    "attributes_field",
    "Node",
    "Edge",
    "Graph",
    "graph_items",
]
