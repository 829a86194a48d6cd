# turbo_editor/core/signal.py
"""
Scene signals - notifies the editor shell after successful scene edits.

Only the scene-editing signals below can be connected or emitted. Handlers
run synchronously in connection order; a failing handler is logged and
never reaches the code that performed the edit.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Optional
import logging

logger = logging.getLogger(__name__)

SIGNAL_NODE_ADDED = 'node_added'        # (node_id, parent_id)
SIGNAL_NODE_REMOVED = 'node_removed'    # (node_id, removed_ids)
SIGNAL_NODE_CHANGED = 'node_changed'    # (node_id, key); key is None for a rename
SIGNAL_SCENE_LOADED = 'scene_loaded'    # (scene,)

SCENE_SIGNALS: FrozenSet[str] = frozenset({
    SIGNAL_NODE_ADDED,
    SIGNAL_NODE_REMOVED,
    SIGNAL_NODE_CHANGED,
    SIGNAL_SCENE_LOADED,
})


def _check_signal(signal: str):
    if signal not in SCENE_SIGNALS:
        raise ValueError(f"Unknown scene signal: {signal!r}")


@dataclass
class Connection:
    """Handle returned by SignalBridge.connect."""
    signal: str
    handler_id: int
    bridge: Optional[SignalBridge] = None

    def disconnect(self):
        if self.bridge is not None:
            self.bridge._handlers[self.signal].pop(self.handler_id, None)
            self.bridge = None


class SignalBridge:
    """Routes scene signals from a Scene or EditorSession to shell handlers."""

    def __init__(self):
        self._handlers: Dict[str, Dict[int, Callable]] = {name: {} for name in SCENE_SIGNALS}
        self._next_id = 0

    def connect(self, signal: str, handler: Callable) -> Connection:
        """Register handler for signal. Raises ValueError for an unknown signal name."""
        _check_signal(signal)
        handler_id = self._next_id
        self._next_id += 1
        self._handlers[signal][handler_id] = handler
        return Connection(signal=signal, handler_id=handler_id, bridge=self)

    def handler_count(self, signal: str) -> int:
        _check_signal(signal)
        return len(self._handlers[signal])

    def emit(self, signal: str, *args):
        _check_signal(signal)
        # Copy so handlers may disconnect themselves mid-emit.
        for handler in list(self._handlers[signal].values()):
            try:
                handler(*args)
            except Exception as e:
                logger.error(f"Scene signal handler failed [{signal}{args!r}]: {e}")
