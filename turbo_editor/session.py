# turbo_editor/session.py
"""
EditorSession - Top-level coordinator for one editing session.

Owns the configuration, the signal bridge and the current scene, and keeps
the last generated program cached until the scene changes.
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging

from .config import EditorConfig
from .codegen import CodeGenerator
from .core.signal import SignalBridge, SIGNAL_SCENE_LOADED
from .scene.graph import Scene, create_scene

logger = logging.getLogger(__name__)


class EditorSession:
    """Single-writer editing session over one scene at a time."""

    def __init__(self, config: EditorConfig = None):
        self.config = config or EditorConfig()
        self.bridge = SignalBridge()
        self.generator = CodeGenerator(self.config.generator)
        self.scene: Scene = create_scene(
            self.config.default_scene_name, bridge=self.bridge, config=self.config.scene
        )
        self._cached: Optional[Tuple[Scene, int, str]] = None  # (scene, revision, code)

    def new_scene(self, name: str = None) -> Scene:
        self.scene = create_scene(
            name or self.config.default_scene_name,
            bridge=self.bridge,
            config=self.config.scene,
        )
        self._cached = None
        logger.info(f"New scene {self.scene.name!r}")
        return self.scene

    def generate_code(self) -> str:
        """Generated program for the current scene, regenerated only after edits."""
        cached = self._cached
        if cached is not None and cached[0] is self.scene and cached[1] == self.scene.revision:
            return cached[2]
        code = self.generator.generate(self.scene)
        self._cached = (self.scene, self.scene.revision, code)
        return code

    def save(self, path: str):
        self.scene.save(path)
        logger.info(f"Saved scene {self.scene.name!r} to {path}")

    def load(self, path: str) -> Scene:
        """
        Replace the current scene with one loaded from path.

        Raises OSError, ValueError (json) or SceneFormatError; on failure the
        current scene is kept.
        """
        scene = Scene.load(path, bridge=self.bridge, config=self.config.scene)
        self.scene = scene
        self._cached = None
        logger.info(f"Loaded scene {scene.name!r} ({scene.count} nodes) from {path}")
        self.bridge.emit(SIGNAL_SCENE_LOADED, scene)
        return scene
