from attrgraph.graph.node import Node

__all__ = ["Node"]
