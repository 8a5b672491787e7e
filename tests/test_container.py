"""Tests for attributes/container.py - The AttributesContainer capability."""

import copy
from dataclasses import dataclass

import pytest

from attrgraph.attributes import AttributeMap, AttributesContainer, attributes_field


class Tagged(AttributesContainer, attributes="attrs"):
    """Hand-written container designating its store by keyword."""

    attrs: AttributeMap

    def __init__(self):
        self.attrs = AttributeMap()


@dataclass
class Cluster(AttributesContainer):
    label: str
    style: AttributeMap = attributes_field()


class TestKeywordDesignation:
    """Containers that name their store with attributes='...'."""

    def test_get_attr_on_empty(self):
        assert Tagged().get_attr("attr1") is None

    def test_with_attrs(self):
        container = Tagged().with_attrs([("attr1", "val1"), ("attr2", "val2")])

        assert len(container.attrs) == 2
        assert container.get_attr("attr1") == "val1"
        assert container.get_attr("attr2") == "val2"

    def test_with_attrs_returns_same_instance(self):
        container = Tagged()
        assert container.with_attrs([("a", "b")]) is container


class TestMarkerDesignation:
    """Containers that mark a dataclass field with attributes_field()."""

    def test_designated_field_recorded(self):
        assert Cluster.__attributes_field__ == "style"

    def test_default_store_is_empty_and_per_instance(self):
        first = Cluster("one")
        second = Cluster("two")

        first.with_attrs([("color", "red")])

        assert first.style == {"color": "red"}
        assert second.style.is_empty()

    def test_get_attr_matches_store_get(self):
        cluster = Cluster("c").with_attrs([("color", "red"), ("color", "blue"), ("shape", "box")])

        for name in ("color", "shape", "missing"):
            assert cluster.get_attr(name) == cluster.style.get(name)

    def test_with_attrs_matches_direct_extend(self):
        pairs = [("a", "1"), ("b", "2"), ("a", "3")]
        via_capability = Cluster("x").with_attrs(pairs)
        direct = Cluster("x")
        direct.style.extend(pairs)

        assert via_capability == direct

    def test_marker_passes_through_field_options(self):
        @dataclass
        class Hidden(AttributesContainer):
            attrs: AttributeMap = attributes_field(repr=False)

        assert "attrs" not in repr(Hidden())

    def test_deepcopy_copies_store(self):
        cluster = Cluster("c").with_attrs([("a", "1")])
        clone = copy.deepcopy(cluster)

        clone.with_attrs([("a", "2")])

        assert cluster.get_attr("a") == "1"
        assert clone.get_attr("a") == "2"


class TestInheritance:
    """Designations carry over to subclasses."""

    def test_subclass_inherits_designation(self):
        class SubCluster(Cluster):
            pass

        sub = SubCluster("s").with_attrs([("k", "v")])
        assert SubCluster.__attributes_field__ == "style"
        assert sub.get_attr("k") == "v"

    def test_subclass_can_redesignate(self):
        class Retagged(Tagged, attributes="extra"):
            extra: AttributeMap

            def __init__(self):
                super().__init__()
                self.extra = AttributeMap()

        item = Retagged().with_attrs([("k", "v")])
        assert item.extra == {"k": "v"}
        assert item.attrs.is_empty()


class TestDefinitionErrors:
    """Malformed containers are rejected when the class is defined."""

    def test_no_designated_field(self):
        with pytest.raises(TypeError, match="Unmarked.*no attribute store"):

            @dataclass
            class Unmarked(AttributesContainer):
                attrs: AttributeMap = None

    def test_plain_class_without_designation(self):
        with pytest.raises(TypeError, match="Bare"):

            class Bare(AttributesContainer):
                pass

    def test_two_marked_fields(self):
        with pytest.raises(TypeError, match="more than one attribute store"):

            @dataclass
            class Twice(AttributesContainer):
                first: AttributeMap = attributes_field()
                second: AttributeMap = attributes_field()

    def test_keyword_conflicts_with_marker(self):
        with pytest.raises(TypeError, match="designates 'other'"):

            @dataclass
            class Conflicted(AttributesContainer, attributes="other"):
                attrs: AttributeMap = attributes_field()

    def test_keyword_agreeing_with_marker_is_accepted(self):
        @dataclass
        class Agreed(AttributesContainer, attributes="attrs"):
            attrs: AttributeMap = attributes_field()

        assert Agreed().with_attrs([("a", "b")]).get_attr("a") == "b"

    def test_keyword_naming_undeclared_field(self):
        with pytest.raises(TypeError, match="Ghost designates 'nope'.*declares no"):

            class Ghost(AttributesContainer, attributes="nope"):
                pass

    def test_keyword_field_declared_on_base_is_accepted(self):
        class Base:
            store: AttributeMap

        class Derived(Base, AttributesContainer, attributes="store"):
            def __init__(self):
                self.store = AttributeMap()

        assert Derived().with_attrs([("a", "b")]).get_attr("a") == "b"

    def test_marker_without_dataclass_cannot_be_instantiated(self):
        class Plain(AttributesContainer):
            attrs = attributes_field()

        with pytest.raises(TypeError, match="Plain marks 'attrs'.*not a dataclass"):
            Plain()

