# turbo_editor/errors.py
"""
Exceptions raised inside the editor core.

Store and generator operations never let these escape; they report failure
by return value. The exceptions surface only from decoding helpers and from
scene deserialization.
"""


class EditorError(Exception):
    """Base class for editor core errors."""


class PropertyDecodeError(EditorError, ValueError):
    """A raw value does not decode to any known property variant."""


class SceneFormatError(EditorError, ValueError):
    """Serialized scene data is malformed or violates the tree invariants."""
