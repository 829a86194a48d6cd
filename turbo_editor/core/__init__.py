# turbo_editor/core/__init__.py
"""
Core services shared by the scene store and the code generator.
"""

from .signal import (
    SignalBridge,
    Connection,
    SCENE_SIGNALS,
    SIGNAL_NODE_ADDED,
    SIGNAL_NODE_REMOVED,
    SIGNAL_NODE_CHANGED,
    SIGNAL_SCENE_LOADED,
)
from .snapshot import NodeSnapshot, SceneSnapshot, SnapshotBuilder
from .color import OPAQUE_WHITE, pack_argb, unpack_argb, parse_hex, to_css_hex

__all__ = [
    'SignalBridge',
    'Connection',
    'SCENE_SIGNALS',
    'SIGNAL_NODE_ADDED',
    'SIGNAL_NODE_REMOVED',
    'SIGNAL_NODE_CHANGED',
    'SIGNAL_SCENE_LOADED',
    'NodeSnapshot',
    'SceneSnapshot',
    'SnapshotBuilder',
    'OPAQUE_WHITE',
    'pack_argb',
    'unpack_argb',
    'parse_hex',
    'to_css_hex',
]
