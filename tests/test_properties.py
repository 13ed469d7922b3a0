"""Tests for custom properties."""

from types import MappingProxyType

import pytest

from tiled_tileset import CoercionError, DeserializationError, Property
from tiled_tileset.model.properties import parse_properties


def test_key_value_records():
    props = parse_properties({"properties": [
        {"name": "solid", "type": "bool", "value": True},
        {"name": "damage", "type": "int", "value": 10},
        {"name": "label", "type": "string", "value": "lava"},
    ]})
    assert list(props) == ["solid", "damage", "label"]
    assert props["solid"] == Property(name="solid", type="bool", value=True)
    assert props["damage"].value == 10
    assert props["label"].value == "lava"


def test_tag_wrapper():
    props = parse_properties({"properties": [{"property": [
        {"name": "solid", "type": "bool", "value": "true"},
        {"name": "speed", "type": "float", "value": "0.5"},
        {"name": "description", "value": "A wooden door"},
    ]}]})
    assert props["solid"].value is True
    assert props["speed"].value == 0.5
    assert props["description"] == Property(name="description", type="string", value="A wooden door")


def test_multiline_text_value():
    props = parse_properties({"properties": [{"property": [
        {"name": "note", "#text": "first\nsecond"},
    ]}]})
    assert props["note"].value == "first\nsecond"


def test_empty_wrapper():
    assert parse_properties({"properties": [{}]}) == {}


def test_legacy_mapping():
    props = parse_properties({
        "properties": {"solid": "true", "name": "door"},
        "propertytypes": {"solid": "bool", "name": "string"},
    })
    assert props["solid"].value is True
    assert props["name"].value == "door"


def test_absent():
    assert parse_properties({}) == {}


def test_bad_typed_value():
    with pytest.raises(CoercionError) as excinfo:
        parse_properties({"properties": [{"property": [
            {"name": "damage", "type": "int", "value": "lots"},
        ]}]}, "tile[0]")
    assert excinfo.value.path == "tile[0].properties[0].property[0].value"


def test_record_without_name():
    with pytest.raises(DeserializationError):
        parse_properties({"properties": [{"type": "int", "value": 1}]})


def test_legacy_types_must_be_a_mapping():
    with pytest.raises(DeserializationError) as excinfo:
        parse_properties({"properties": {"a": 1}, "propertytypes": ["int"]}, "tile[0]")
    assert excinfo.value.path == "tile[0].propertytypes"


def test_legacy_type_name_must_be_a_string():
    with pytest.raises(CoercionError) as excinfo:
        parse_properties({"properties": {"a": 1}, "propertytypes": {"a": 3}})
    assert excinfo.value.path == "propertytypes.a"


@pytest.mark.parametrize("record", [
    {},
    {"properties": [{"name": "a", "value": "x"}]},
    {"properties": [{"property": [{"name": "a", "value": "x"}]}]},
    {"properties": {"a": "x"}},
])
def test_result_is_read_only(record):
    props = parse_properties(record)
    assert isinstance(props, MappingProxyType)
    with pytest.raises(TypeError):
        props["b"] = Property(name="b")
