# turbo_editor/config.py
"""
Editor configuration.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import uuid


def _uuid_text() -> str:
    return str(uuid.uuid4())


@dataclass
class SceneConfig:
    root_name: str = "Root"
    id_factory: Callable[[], str] = _uuid_text


@dataclass
class GeneratorConfig:
    block_open: str = "turbo::go! {"
    block_close: str = "}"
    indent: str = "    "
    base_depth: int = 1


@dataclass
class EditorConfig:
    default_scene_name: str = "Untitled"
    scene: SceneConfig = field(default_factory=SceneConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
