# turbo_editor/codegen/emitters.py
"""
Per-node-type emission rules.

Each NodeType maps to an Emitter. Adding support for a new primitive is one
@register_emitter function; types without a registration fall back to a
placeholder comment.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..core.color import OPAQUE_WHITE
from ..core.snapshot import NodeSnapshot
from ..scene.node import NodeType
from ..scene.properties import PropertyKind
from .formatting import format_color, format_number

EmitFn = Callable[[NodeSnapshot], Optional[str]]


@dataclass(frozen=True)
class Emitter:
    """
    emit returns the statement for a node (None for no statement).
    nests_children says whether children are indented one level deeper.
    """
    emit: EmitFn
    nests_children: bool = True


_EMITTERS: Dict[NodeType, Emitter] = {}


def register_emitter(node_type: NodeType, nests_children: bool = True):
    """Decorator to register the emission rule for a node type."""
    def decorator(func: EmitFn):
        _EMITTERS[node_type] = Emitter(emit=func, nests_children=nests_children)
        return func
    return decorator


def _emit_unimplemented(node: NodeSnapshot) -> str:
    return f"// Unimplemented node type: {node.node_type.value}"


UNIMPLEMENTED = Emitter(emit=_emit_unimplemented, nests_children=True)


def get_emitter(node_type: NodeType) -> Emitter:
    return _EMITTERS.get(node_type, UNIMPLEMENTED)


# =============================================================================
# Property reads (silent fallback)
# =============================================================================

def read(node: NodeSnapshot, key: str, kind: PropertyKind, default: Any) -> Any:
    prop = node.get(key)
    if prop is None or prop.kind is not kind:
        return default
    return prop.value


def _box(node: NodeSnapshot) -> str:
    x = read(node, 'x', PropertyKind.NUMBER, 0.0)
    y = read(node, 'y', PropertyKind.NUMBER, 0.0)
    w = read(node, 'width', PropertyKind.NUMBER, 100.0)
    h = read(node, 'height', PropertyKind.NUMBER, 100.0)
    return (f"x = {format_number(x)}, y = {format_number(y)}, "
            f"w = {format_number(w)}, h = {format_number(h)}")


# =============================================================================
# Built-in rules
# =============================================================================

@register_emitter(NodeType.CONTAINER, nests_children=False)
def emit_container(node: NodeSnapshot) -> Optional[str]:
    # Containers are transparent: no statement, children stay at this depth.
    return None


@register_emitter(NodeType.SPRITE)
def emit_sprite(node: NodeSnapshot) -> str:
    path = read(node, 'path', PropertyKind.STRING, "default")
    return f'sprite!("{path}", {_box(node)});'


@register_emitter(NodeType.RECTANGLE)
def emit_rectangle(node: NodeSnapshot) -> str:
    color = read(node, 'color', PropertyKind.COLOR, OPAQUE_WHITE)
    radius = read(node, 'border_radius', PropertyKind.NUMBER, 0.0)
    return (f"rect!({_box(node)}, color = {format_color(color)}, "
            f"border_radius = {format_number(radius)});")
