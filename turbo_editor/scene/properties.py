# turbo_editor/scene/properties.py
"""
Property values - the typed attributes carried by scene nodes.

A property value is one of four variants:

- StringValue:  text (sprite paths, labels)
- NumberValue:  double-precision float (positions, sizes)
- BooleanValue: flag
- ColorValue:   packed 32-bit 0xAARRGGBB color

The serialized form is an externally tagged mapping with a single key,
e.g. {"Color": 4278255360} or {"String": "hero.png"}.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Optional, Type

import numpy as np

from ..core.color import is_packed_color, parse_hex, unpack_argb
from ..errors import PropertyDecodeError


class PropertyKind(Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    COLOR = "Color"


# =============================================================================
# Variants
# =============================================================================

@dataclass(frozen=True)
class PropertyValue:
    """Base class for property variants."""
    kind: ClassVar[PropertyKind]
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {self.kind.value: self.value}


@dataclass(frozen=True)
class StringValue(PropertyValue):
    kind: ClassVar[PropertyKind] = PropertyKind.STRING
    value: str


@dataclass(frozen=True)
class NumberValue(PropertyValue):
    kind: ClassVar[PropertyKind] = PropertyKind.NUMBER
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))


@dataclass(frozen=True)
class BooleanValue(PropertyValue):
    kind: ClassVar[PropertyKind] = PropertyKind.BOOLEAN
    value: bool


@dataclass(frozen=True)
class ColorValue(PropertyValue):
    kind: ClassVar[PropertyKind] = PropertyKind.COLOR
    value: int

    def __post_init__(self):
        object.__setattr__(self, 'value', int(self.value))

    def rgba(self) -> np.ndarray:
        """Float32 RGBA channels in 0-1 range."""
        return unpack_argb(self.value)


VARIANTS: Dict[PropertyKind, Type[PropertyValue]] = {
    PropertyKind.STRING: StringValue,
    PropertyKind.NUMBER: NumberValue,
    PropertyKind.BOOLEAN: BooleanValue,
    PropertyKind.COLOR: ColorValue,
}


# =============================================================================
# Decoding
# =============================================================================

def _check_payload(kind: PropertyKind, payload: Any) -> Any:
    if kind is PropertyKind.STRING:
        if isinstance(payload, str):
            return payload
    elif kind is PropertyKind.NUMBER:
        if isinstance(payload, (int, float)) and not isinstance(payload, bool):
            try:
                return float(payload)
            except OverflowError:
                raise PropertyDecodeError(
                    f"Number {payload} is out of double-precision range"
                ) from None
    elif kind is PropertyKind.BOOLEAN:
        if isinstance(payload, bool):
            return payload
    elif kind is PropertyKind.COLOR:
        if is_packed_color(payload):
            return int(payload)
        if isinstance(payload, str):
            try:
                return parse_hex(payload)
            except ValueError as e:
                raise PropertyDecodeError(str(e)) from None
    raise PropertyDecodeError(
        f"{kind.value} property cannot hold {type(payload).__name__} {payload!r}"
    )


def decode_property_value(raw: Any) -> PropertyValue:
    """
    Decode a raw value into a PropertyValue.

    Accepts a PropertyValue instance (returned as a fresh, validated copy)
    or the tagged mapping form. Raises PropertyDecodeError otherwise.
    """
    if isinstance(raw, PropertyValue):
        kind, payload = raw.kind, raw.value
    elif isinstance(raw, Mapping):
        if len(raw) != 1:
            raise PropertyDecodeError(f"Expected a single variant tag, got {list(raw)!r}")
        tag, payload = next(iter(raw.items()))
        try:
            kind = PropertyKind(tag)
        except ValueError:
            raise PropertyDecodeError(f"Unknown property variant: {tag!r}") from None
    else:
        raise PropertyDecodeError(f"Cannot decode property from {type(raw).__name__}")

    return VARIANTS[kind](_check_payload(kind, payload))


_BUILTIN_KINDS: Dict[type, PropertyKind] = {
    str: PropertyKind.STRING,
    float: PropertyKind.NUMBER,
    bool: PropertyKind.BOOLEAN,
}


def resolve_kind(kind: Any) -> Optional[PropertyKind]:
    """
    Map a read request to a PropertyKind.

    Accepts a PropertyKind, a variant class (NumberValue) or one of the
    unambiguous builtins str / float / bool. int is ambiguous between
    Number and Color and resolves to None, like anything else unrecognised.
    """
    if isinstance(kind, PropertyKind):
        return kind
    if isinstance(kind, type):
        if issubclass(kind, PropertyValue) and kind is not PropertyValue:
            return kind.kind
        return _BUILTIN_KINDS.get(kind)
    return None
