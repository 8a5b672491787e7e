"""Pytest fixtures shared by the attrgraph tests."""

import pytest


@pytest.fixture
def empty_attrs():
    """Fresh, empty AttributeMap."""
    from attrgraph.attributes import AttributeMap

    return AttributeMap()


@pytest.fixture
def abc_graph():
    """Graph with nodes a, b and one edge a -- b."""
    from attrgraph.graph import Edge, Graph, Node

    return Graph().with_nodes([Node("a"), Node("b")]).with_edges([Edge("a", "b")])


@pytest.fixture
def styled_graph():
    """Graph with attributes on the graph, its nodes and its edges."""
    from attrgraph.graph import Edge, Graph, Node

    return (
        Graph()
        .with_attrs([("foo", "1"), ("title", "Testing Attrs"), ("bar", "true")])
        .with_nodes(
            [
                Node("a").with_attrs([("color", "green")]),
                Node("c"),
                Node("b").with_attrs([("label", "Beta!")]),
            ]
        )
        .with_edges(
            [
                Edge("b", "c"),
                Edge("a", "b").with_attrs([("color", "blue")]),
            ]
        )
    )
