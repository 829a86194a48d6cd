# turbo_editor/scene/__init__.py
"""
Scene Module - the editable node tree.

- Scene: arena of nodes keyed by identifier, with the mutation API
- EditorNode / NodeType: typed nodes and their default properties
- PropertyValue variants: String, Number, Boolean, Color
"""

from .properties import (
    PropertyKind,
    PropertyValue,
    StringValue,
    NumberValue,
    BooleanValue,
    ColorValue,
    decode_property_value,
)
from .node import EditorNode, NodeType, default_properties
from .graph import Scene, create_scene

__all__ = [
    'Scene',
    'create_scene',
    'EditorNode',
    'NodeType',
    'default_properties',
    'PropertyKind',
    'PropertyValue',
    'StringValue',
    'NumberValue',
    'BooleanValue',
    'ColorValue',
    'decode_property_value',
]
