import numpy as np
import pytest
from turbo_editor.core.color import (
    OPAQUE_WHITE, is_packed_color, pack_argb, unpack_argb, parse_hex, to_css_hex,
)


def test_unpack_white():
    assert np.allclose(unpack_argb(OPAQUE_WHITE), [1.0, 1.0, 1.0, 1.0])


def test_pack_unpack_channels():
    packed = pack_argb(1.0, 0.0, 1.0, 0.0)
    assert packed == 0x00FF00FF
    assert np.allclose(unpack_argb(packed), [1.0, 0.0, 1.0, 0.0])


def test_pack_clamps():
    assert pack_argb(2.0, -1.0, 0.5, 1.0) == 0xFFFF0080


def test_parse_hex():
    assert parse_hex("#ff6b6b") == 0xFFFF6B6B
    assert parse_hex("#00ff00ff") == 0x00FF00FF
    with pytest.raises(ValueError):
        parse_hex("#12345")
    with pytest.raises(ValueError):
        parse_hex("#+12345")


def test_css_hex_drops_alpha():
    assert to_css_hex(0x00FF00FF) == "#ff00ff"


def test_is_packed_color():
    assert is_packed_color(0)
    assert is_packed_color(0xFFFFFFFF)
    assert not is_packed_color(0x100000000)
    assert not is_packed_color(-1)
    assert not is_packed_color(True)
    assert not is_packed_color(1.0)


@pytest.mark.parametrize("text", ["FFFFFF", "##FFFFFF", "ff00ff00", "", "#"])
def test_parse_hex_requires_single_leading_hash(text):
    with pytest.raises(ValueError):
        parse_hex(text)
