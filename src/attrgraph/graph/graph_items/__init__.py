"""graph_items - Nodes and edges under their item namespaces.

``graph_items.node.Node`` and ``graph_items.edge.Edge`` are the same
classes as ``attrgraph.graph.Node`` and ``attrgraph.graph.Edge``.
"""

from attrgraph.graph.graph_items import edge, node

__all__ = ["node", "edge"]
