# turbo_editor/core/snapshot.py
"""
Scene Snapshotting

The live Scene is the MUTABLE side, used for editing. Code generation reads
immutable snapshots extracted from it, so a generation pass sees one
consistent state no matter what the editor does afterwards.

Key principles:
1. Snapshots are immutable once created
2. Snapshot creation happens on the thread that owns the scene
3. Consumers only ever see snapshots, never live nodes
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, TYPE_CHECKING
import threading

if TYPE_CHECKING:
    from ..scene.graph import Scene
    from ..scene.node import EditorNode, NodeType
    from ..scene.properties import PropertyValue


@dataclass(frozen=True)
class NodeSnapshot:
    """Frozen view of one node. Property values are themselves immutable."""
    id: str
    name: str
    node_type: NodeType
    parent_id: Optional[str]
    children: Tuple[str, ...]
    properties: Mapping[str, PropertyValue]

    @staticmethod
    def from_node(node: EditorNode) -> NodeSnapshot:
        return NodeSnapshot(
            id=node.id,
            name=node.name,
            node_type=node.node_type,
            parent_id=node.parent_id,
            children=tuple(node.children),
            properties=MappingProxyType(dict(node.properties)),
        )

    def get(self, key: str) -> Optional[PropertyValue]:
        return self.properties.get(key)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'node_type': self.node_type.value,
            'parent_id': self.parent_id,
            'children': list(self.children),
            'properties': {k: v.to_dict() for k, v in self.properties.items()},
        }


@dataclass(frozen=True)
class SceneSnapshot:
    """
    Complete immutable copy of a scene at one revision.

    Once created this object is safe to read from any thread.
    """
    snapshot_id: int
    name: str
    root_id: str
    revision: int
    nodes: Mapping[str, NodeSnapshot]

    def get(self, node_id: str) -> Optional[NodeSnapshot]:
        return self.nodes.get(node_id)

    @property
    def root(self) -> NodeSnapshot:
        return self.nodes[self.root_id]

    def __len__(self) -> int:
        return len(self.nodes)


class SnapshotBuilder:
    """
    Builds SceneSnapshot objects from a live scene.

    Not thread-safe with respect to the scene: call it from the thread that
    owns the scene while no mutation is in progress.
    """

    _next_snapshot_id = 0
    _snapshot_lock = threading.Lock()

    @classmethod
    def _get_next_id(cls) -> int:
        with cls._snapshot_lock:
            sid = cls._next_snapshot_id
            cls._next_snapshot_id += 1
            return sid

    @staticmethod
    def from_scene(scene: Scene) -> SceneSnapshot:
        nodes = {
            node_id: NodeSnapshot.from_node(node)
            for node_id, node in scene._nodes.items()
        }
        return SceneSnapshot(
            snapshot_id=SnapshotBuilder._get_next_id(),
            name=scene.name,
            root_id=scene.root_id,
            revision=scene.revision,
            nodes=MappingProxyType(nodes),
        )
