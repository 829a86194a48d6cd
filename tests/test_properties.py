import numpy as np
import pytest
from turbo_editor.errors import PropertyDecodeError
from turbo_editor.scene.properties import (
    PropertyKind, StringValue, NumberValue, BooleanValue, ColorValue,
    decode_property_value,
)


def test_decode_tagged_forms():
    assert decode_property_value({"String": "a.png"}) == StringValue("a.png")
    assert decode_property_value({"Number": 3}) == NumberValue(3.0)
    assert decode_property_value({"Boolean": True}) == BooleanValue(True)
    assert decode_property_value({"Color": 0xFF102030}) == ColorValue(0xFF102030)


def test_decode_hex_color():
    assert decode_property_value({"Color": "#102030"}) == ColorValue(0xFF102030)
    assert decode_property_value({"Color": "#80102030"}) == ColorValue(0x80102030)


def test_decode_passes_instances_through():
    value = NumberValue(2.5)
    assert decode_property_value(value) == value


@pytest.mark.parametrize("raw", [
    "plain string",
    42,
    None,
    {},
    {"Number": 1, "String": "x"},
    {"Vector": [1, 2]},
    {"Number": True},
    {"Number": "1"},
    {"Boolean": 1},
    {"String": 5},
    {"Color": 0x100000000},
    {"Color": False},
    {"Color": "#12"},
    {"Color": "#GG0000"},
])
def test_decode_rejects(raw):
    with pytest.raises(PropertyDecodeError):
        decode_property_value(raw)


def test_to_dict_is_tagged():
    assert StringValue("x").to_dict() == {"String": "x"}
    assert ColorValue(1).to_dict() == {"Color": 1}
    assert NumberValue(1).kind is PropertyKind.NUMBER


def test_variants_with_equal_payloads_differ():
    assert NumberValue(1.0) != ColorValue(1)
    assert BooleanValue(True) != NumberValue(1.0)


def test_color_rgba():
    rgba = ColorValue(0x80FF0000).rgba()
    assert rgba.dtype == np.float32
    assert np.allclose(rgba, [1.0, 0.0, 0.0, 128 / 255.0])


def test_decode_rejects_number_out_of_float_range():
    with pytest.raises(PropertyDecodeError):
        decode_property_value({"Number": 10 ** 400})
    assert decode_property_value({"Number": 10 ** 20}) == NumberValue(1e20)


def test_decode_color_requires_hash_prefix():
    with pytest.raises(PropertyDecodeError):
        decode_property_value({"Color": "FF00FF"})
    with pytest.raises(PropertyDecodeError):
        decode_property_value({"Color": "##FF00FF"})
