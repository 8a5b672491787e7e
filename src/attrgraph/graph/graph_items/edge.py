from attrgraph.graph.edge import Edge

__all__ = ["Edge"]
