# turbo_editor/__init__.py
"""
Turbo Editor - scene-graph editor core.

Core components:
- Scene: Node store with tree invariants and typed properties
- CodeGenerator: Compiles a scene snapshot into turbo::go! source
- EditorSession: Top-level coordinator (scene, signals, cached output)
- SignalBridge: Event routing to the editor shell
"""

from .core import (
    SignalBridge,
    NodeSnapshot,
    SceneSnapshot,
    SIGNAL_NODE_ADDED,
    SIGNAL_NODE_REMOVED,
    SIGNAL_NODE_CHANGED,
    SIGNAL_SCENE_LOADED,
)
from .scene import (
    Scene,
    create_scene,
    NodeType,
    PropertyKind,
    StringValue,
    NumberValue,
    BooleanValue,
    ColorValue,
)
from .codegen import CodeGenerator, generate_turbo_code
from .config import EditorConfig, SceneConfig, GeneratorConfig
from .errors import EditorError, PropertyDecodeError, SceneFormatError
from .session import EditorSession

__version__ = '0.1.0'

__all__ = [
    # Scene
    'Scene',
    'create_scene',
    'NodeType',
    'PropertyKind',
    'StringValue',
    'NumberValue',
    'BooleanValue',
    'ColorValue',
    'NodeSnapshot',
    'SceneSnapshot',

    # Codegen
    'CodeGenerator',
    'generate_turbo_code',

    # Session
    'EditorSession',
    'EditorConfig',
    'SceneConfig',
    'GeneratorConfig',

    # Signals
    'SignalBridge',
    'SIGNAL_NODE_ADDED',
    'SIGNAL_NODE_REMOVED',
    'SIGNAL_NODE_CHANGED',
    'SIGNAL_SCENE_LOADED',

    # Errors
    'EditorError',
    'PropertyDecodeError',
    'SceneFormatError',
]
