# turbo_editor/scene/node.py
"""
EditorNode - a typed entity in the scene tree.

Nodes never hold references to other nodes. Parent and children are
identifiers resolved through the owning Scene.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .properties import (
    PropertyValue, StringValue, NumberValue, ColorValue, decode_property_value,
)
from ..core.color import OPAQUE_WHITE


class NodeType(Enum):
    CONTAINER = "Container"
    SPRITE = "Sprite"
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"
    PATH = "Path"
    TEXT = "Text"

    @classmethod
    def parse(cls, value) -> Optional[NodeType]:
        """Resolve a NodeType from itself, its value ('Sprite') or name ('SPRITE')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value == member.name:
                    return member
        return None


# =============================================================================
# Defaults
# =============================================================================

def _box_defaults() -> Dict[str, PropertyValue]:
    return {
        'x': NumberValue(0.0),
        'y': NumberValue(0.0),
        'width': NumberValue(100.0),
        'height': NumberValue(100.0),
    }


def default_properties(node_type: NodeType) -> Dict[str, PropertyValue]:
    """Properties a freshly created node of the given type starts with."""
    if node_type is NodeType.CONTAINER:
        return _box_defaults()
    if node_type is NodeType.SPRITE:
        props = _box_defaults()
        props['path'] = StringValue("default")
        return props
    if node_type is NodeType.RECTANGLE:
        props = _box_defaults()
        props['color'] = ColorValue(OPAQUE_WHITE)
        props['border_radius'] = NumberValue(0.0)
        return props
    return {'x': NumberValue(0.0), 'y': NumberValue(0.0)}


# =============================================================================
# Editor Node
# =============================================================================

@dataclass
class EditorNode:
    id: str
    name: str
    node_type: NodeType
    parent_id: Optional[str] = None
    children: List[str] = field(default_factory=list)
    properties: Dict[str, PropertyValue] = field(default_factory=dict)

    @staticmethod
    def create(node_id: str, name: str, node_type: NodeType,
               parent_id: Optional[str] = None) -> EditorNode:
        """Build a node populated with its type's default properties."""
        return EditorNode(
            id=node_id,
            name=name,
            node_type=node_type,
            parent_id=parent_id,
            properties=default_properties(node_type),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'node_type': self.node_type.value,
            'parent_id': self.parent_id,
            'children': list(self.children),
            'properties': {k: v.to_dict() for k, v in self.properties.items()},
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> EditorNode:
        """
        Rebuild a node from its serialized form.

        Raises KeyError, TypeError or ValueError (including PropertyDecodeError)
        on malformed data; Scene.from_dict wraps these.
        """
        node_type = NodeType.parse(data['node_type'])
        if node_type is None:
            raise ValueError(f"Unknown node type: {data['node_type']!r}")
        children = data.get('children', [])
        if not isinstance(children, list) or not all(isinstance(c, str) for c in children):
            raise TypeError("children must be a list of identifiers")
        parent_id = data.get('parent_id')
        if parent_id is not None and not isinstance(parent_id, str):
            raise TypeError("parent_id must be an identifier or null")
        return EditorNode(
            id=str(data['id']),
            name=str(data.get('name', '')),
            node_type=node_type,
            parent_id=parent_id,
            children=list(children),
            properties={
                str(k): decode_property_value(v)
                for k, v in dict(data.get('properties', {})).items()
            },
        )

    def __repr__(self) -> str:
        return (f"EditorNode(name={self.name!r}, type={self.node_type.value}, "
                f"id={self.id!r}, children={len(self.children)})")
