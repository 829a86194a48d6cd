# turbo_editor/codegen/formatting.py
"""
Literal formatting for generated Turbo code.

Numbers follow one rule so output is byte-stable:

- integral finite values print without a fractional part: 0, 100, -3
- other finite values print their shortest round-trip digits in positional
  notation, never scientific: 1.5, 0.0000001
- negative zero prints as -0
- NaN prints as NaN, infinities as inf / -inf
"""

from __future__ import annotations
from decimal import Decimal
import math


def format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    text = format(Decimal(repr(value)), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def format_color(packed: int) -> str:
    """0x-prefixed, eight uppercase hex digits."""
    return f"0x{packed:08X}"
