"""Attributes module - Attribute storage and the container capability.

Exports:
- AttributeMap: String key/value store
- AttributesContainer: Capability base class for entities with attributes
- attributes_field: Marker designating a dataclass field as the store
- to_attr_str: String-like coercion used for names and values
"""

from attrgraph.attributes.container import AttributesContainer, attributes_field
from attrgraph.attributes.store import AttributeMap, to_attr_str

__all__ = [
    "AttributeMap",
    "AttributesContainer",
    "attributes_field",
    "to_attr_str",
]
