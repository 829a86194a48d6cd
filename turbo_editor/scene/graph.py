# turbo_editor/scene/graph.py
"""
Scene Graph

The node store for scene authoring. This is the MUTABLE side; code
generation reads immutable snapshots extracted from it (see snapshot.py).

All nodes live in one arena keyed by identifier. Parent and child links are
identifiers, so the tree never forms reference cycles. Every public mutation
either succeeds completely or leaves the scene untouched, and reports the
outcome by return value.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Type, Union
import json
import logging

from .node import EditorNode, NodeType
from .properties import PropertyKind, PropertyValue, decode_property_value, resolve_kind
from ..config import SceneConfig
from ..core.signal import (
    SignalBridge, SIGNAL_NODE_ADDED, SIGNAL_NODE_REMOVED, SIGNAL_NODE_CHANGED,
)
from ..core.snapshot import NodeSnapshot, SceneSnapshot, SnapshotBuilder
from ..errors import PropertyDecodeError, SceneFormatError

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 16


class Scene:
    """A named tree of nodes rooted at a Container."""

    def __init__(self, name: str, bridge: SignalBridge = None, config: SceneConfig = None):
        self.name = name
        self.config = config or SceneConfig()
        self._bridge = bridge
        self._nodes: Dict[str, EditorNode] = {}
        self._retired: Set[str] = set()
        self.revision = 0

        root_id = self._allocate_id()
        if root_id is None:
            raise RuntimeError("id_factory could not produce a root identifier")
        self.root_id = root_id
        self._nodes[root_id] = EditorNode.create(root_id, self.config.root_name, NodeType.CONTAINER)

    def bind_bridge(self, bridge: SignalBridge):
        self._bridge = bridge

    def _emit(self, signal: str, *args):
        if self._bridge:
            self._bridge.emit(signal, *args)

    def _allocate_id(self) -> Optional[str]:
        for _ in range(_MAX_ID_ATTEMPTS):
            node_id = self.config.id_factory()
            if node_id not in self._nodes and node_id not in self._retired:
                return node_id
        logger.error("id_factory keeps returning identifiers already in use")
        return None

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, parent_id: str, name: str,
                 node_type: Union[NodeType, str]) -> Optional[str]:
        """
        Create a node under parent_id and return its identifier.

        The new node is appended after the parent's existing children.
        Returns None (and changes nothing) if the parent does not exist or
        the node type is unknown.
        """
        parent = self._nodes.get(parent_id)
        if parent is None:
            logger.debug(f"add_node: parent {parent_id!r} not found")
            return None

        resolved = NodeType.parse(node_type)
        if resolved is None:
            logger.warning(f"add_node: unknown node type {node_type!r}")
            return None

        node_id = self._allocate_id()
        if node_id is None:
            return None

        node = EditorNode.create(node_id, name, resolved, parent_id=parent_id)
        parent.children.append(node_id)
        self._nodes[node_id] = node
        self.revision += 1

        logger.debug(f"Added {resolved.value} {name!r} ({node_id}) under {parent_id}")
        self._emit(SIGNAL_NODE_ADDED, node_id, parent_id)
        return node_id

    def remove_node(self, node_id: str) -> bool:
        """
        Remove a node and its whole subtree.

        The root can never be removed. Returns False (and changes nothing)
        for the root or an unknown identifier.
        """
        if node_id == self.root_id:
            logger.debug("remove_node: refusing to remove the root")
            return False

        node = self._nodes.get(node_id)
        if node is None:
            logger.debug(f"remove_node: {node_id!r} not found")
            return False

        # Pre-order; reversed, every descendant precedes its ancestors.
        doomed = list(self._walk(node_id))

        parent = self._nodes.get(node.parent_id)
        if parent is not None:
            parent.children = [cid for cid in parent.children if cid != node_id]

        for doomed_id in reversed(doomed):
            del self._nodes[doomed_id]
            self._retired.add(doomed_id)
        self.revision += 1

        logger.debug(f"Removed {node_id} and {len(doomed) - 1} descendant(s)")
        self._emit(SIGNAL_NODE_REMOVED, node_id, tuple(doomed))
        return True

    def set_property(self, node_id: str, key: str, value: Any) -> bool:
        """
        Overwrite or insert a property.

        value may be a PropertyValue or its tagged mapping form
        ({"Number": 10.0}). Returns False if the node does not exist or the
        value cannot be decoded.
        """
        node = self._nodes.get(node_id)
        if node is None:
            logger.debug(f"set_property: {node_id!r} not found")
            return False

        try:
            decoded = decode_property_value(value)
        except PropertyDecodeError as e:
            logger.warning(f"set_property {key!r} on {node_id}: {e}")
            return False

        node.properties[key] = decoded
        self.revision += 1
        self._emit(SIGNAL_NODE_CHANGED, node_id, key)
        return True

    def remove_property(self, node_id: str, key: str) -> bool:
        """Drop a property so reads fall back to their defaults."""
        node = self._nodes.get(node_id)
        if node is None or key not in node.properties:
            return False
        del node.properties[key]
        self.revision += 1
        self._emit(SIGNAL_NODE_CHANGED, node_id, key)
        return True

    def rename_node(self, node_id: str, name: str) -> bool:
        node = self._nodes.get(node_id)
        if node is None:
            return False
        node.name = name
        self.revision += 1
        self._emit(SIGNAL_NODE_CHANGED, node_id, None)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_node(self, node_id: str) -> Optional[NodeSnapshot]:
        node = self._nodes.get(node_id)
        if node is None:
            return None
        return NodeSnapshot.from_node(node)

    def get_property(self, node_id: str, key: str,
                     kind: Union[PropertyKind, Type[PropertyValue]],
                     default: Any = None) -> Any:
        """
        Typed property read.

        kind is a PropertyKind, a variant class, or str / float / bool.
        Returns the stored payload when the node exists, the key is set and
        the stored variant matches kind; otherwise returns default.
        """
        resolved = resolve_kind(kind)
        if resolved is None:
            logger.warning(f"get_property: {kind!r} is not a property kind")
            return default
        kind = resolved
        node = self._nodes.get(node_id)
        if node is None:
            return default
        prop = node.properties.get(key)
        if prop is None or prop.kind is not kind:
            return default
        return prop.value

    def children_of(self, node_id: str) -> Tuple[str, ...]:
        node = self._nodes.get(node_id)
        return tuple(node.children) if node else ()

    def iter_subtree(self, node_id: str) -> Iterator[str]:
        """Pre-order identifiers of node_id and its descendants."""
        if node_id not in self._nodes:
            return iter(())
        return self._walk(node_id)

    def _walk(self, start_id: str) -> Iterator[str]:
        seen: Set[str] = set()
        stack = [start_id]
        while stack:
            current = stack.pop()
            if current in seen or current not in self._nodes:
                continue
            seen.add(current)
            yield current
            stack.extend(reversed(self._nodes[current].children))

    @property
    def count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def snapshot(self) -> SceneSnapshot:
        return SnapshotBuilder.from_scene(self)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def check_invariants(self) -> List[str]:
        """
        Check tree well-formedness.
        Returns list of error messages (empty = valid).
        """
        errors: List[str] = []
        nodes = self._nodes

        root = nodes.get(self.root_id)
        if root is None:
            return [f"root {self.root_id!r} is missing"]
        if root.parent_id is not None:
            errors.append("root has a parent")
        if root.node_type is not NodeType.CONTAINER:
            errors.append(f"root is a {root.node_type.value}, not a Container")

        for node_id, node in nodes.items():
            if node.id != node_id:
                errors.append(f"node stored under {node_id!r} claims id {node.id!r}")
            if node_id != self.root_id:
                parent = nodes.get(node.parent_id)
                if parent is None:
                    errors.append(f"{node_id} has missing parent {node.parent_id!r}")
                elif parent.children.count(node_id) != 1:
                    errors.append(f"{node_id} listed {parent.children.count(node_id)} "
                                  f"time(s) by its parent {node.parent_id}")
            for child_id in node.children:
                child = nodes.get(child_id)
                if child is None:
                    errors.append(f"{node_id} lists unknown child {child_id!r}")
                elif child.parent_id != node_id:
                    errors.append(f"{child_id} is listed by {node_id} "
                                  f"but its parent is {child.parent_id!r}")

        reached: Set[str] = set()
        stack = [self.root_id]
        while stack:
            current = stack.pop()
            if current in reached:
                errors.append(f"{current} is reachable more than once")
                continue
            reached.add(current)
            node = nodes.get(current)
            if node is not None:
                stack.extend(node.children)

        for orphan in sorted(set(nodes) - reached):
            errors.append(f"{orphan} is not reachable from the root")

        return errors

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'root_id': self.root_id,
            'nodes': [self._nodes[nid].to_dict() for nid in self._walk(self.root_id)],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], bridge: SignalBridge = None,
                  config: SceneConfig = None) -> Scene:
        """
        Rebuild a scene from to_dict() output.
        Raises SceneFormatError on malformed or inconsistent data.
        """
        try:
            name = str(data['name'])
            root_id = str(data['root_id'])
            loaded = [EditorNode.from_dict(item) for item in data['nodes']]
        except (KeyError, TypeError, ValueError) as e:
            raise SceneFormatError(f"Malformed scene data: {e!r}") from e

        nodes: Dict[str, EditorNode] = {}
        for node in loaded:
            if node.id in nodes:
                raise SceneFormatError(f"Duplicate node id {node.id!r}")
            nodes[node.id] = node

        scene = cls(name, bridge=bridge, config=config)
        scene._nodes = nodes
        scene.root_id = root_id

        errors = scene.check_invariants()
        if errors:
            raise SceneFormatError("; ".join(errors))
        return scene

    def save(self, path: str):
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str, bridge: SignalBridge = None, config: SceneConfig = None) -> Scene:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data, bridge=bridge, config=config)

    def __repr__(self) -> str:
        return f"Scene(name={self.name!r}, nodes={len(self._nodes)}, revision={self.revision})"


def create_scene(name: str, bridge: SignalBridge = None, config: SceneConfig = None) -> Scene:
    """Build a fresh scene whose root is an empty Container."""
    return Scene(name, bridge=bridge, config=config)
