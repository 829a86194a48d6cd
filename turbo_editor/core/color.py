# turbo_editor/core/color.py
"""
Packed color helpers.

Colors are stored as a single 32-bit integer laid out as 0xAARRGGBB:
alpha in the high byte, then red, green, blue. The generator prints the
packed value verbatim; preview consumers unpack it into float channels.
"""

from __future__ import annotations
import numpy as np

OPAQUE_WHITE = 0xFFFFFFFF

_SHIFTS = np.array([16, 8, 0, 24], dtype=np.uint32)  # R, G, B, A
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_packed_color(value) -> bool:
    """True for an int (not bool) that fits in 32 unsigned bits."""
    return (
        isinstance(value, (int, np.integer))
        and not isinstance(value, (bool, np.bool_))
        and 0 <= int(value) <= 0xFFFFFFFF
    )


def unpack_argb(packed: int) -> np.ndarray:
    """Unpack 0xAARRGGBB into float32 RGBA components in 0-1 range."""
    channels = (np.uint32(packed) >> _SHIFTS) & np.uint32(0xFF)
    return channels.astype(np.float32) / 255.0


def pack_argb(r: float, g: float, b: float, a: float = 1.0) -> int:
    """Pack 0-1 float channels into 0xAARRGGBB. Out-of-range input is clamped."""
    rgba = np.clip(np.array([r, g, b, a], dtype=np.float64), 0.0, 1.0)
    bytes_ = np.rint(rgba * 255.0).astype(np.uint32)
    return int(np.bitwise_or.reduce(bytes_ << _SHIFTS))


def parse_hex(hex_str: str) -> int:
    """Parse '#RRGGBB' (opaque) or '#AARRGGBB' into a packed color."""
    if not isinstance(hex_str, str) or not hex_str.startswith('#'):
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    digits = hex_str[1:]
    if len(digits) not in (6, 8) or any(c not in _HEX_DIGITS for c in digits):
        raise ValueError(f"Invalid hex color: {hex_str}")
    value = int(digits, 16)
    if len(digits) == 6:
        value |= 0xFF000000
    return value


def to_css_hex(packed: int) -> str:
    """CSS '#rrggbb' for a packed color; alpha is dropped."""
    return f"#{packed & 0xFFFFFF:06x}"
