"""
Custom properties attached to tilesets, tiles, object layers and objects.

=============================================================================
WIRE SHAPES
=============================================================================

key-value (list of records):
    "properties": [{"name": "solid", "type": "bool", "value": true}]

tag (one wrapper holding repeated <property>):
    "properties": [{"property": [{"name": "solid", "type": "bool", "value": "true"}]}]

legacy key-value (flat mapping, types in a sibling mapping):
    "properties": {"solid": true}, "propertytypes": {"solid": "bool"}

=============================================================================
SUPPORTED TYPES
=============================================================================

    int, float, bool   converted with the scalar coercers
    string, color,
    file, object,
    class              kept as written

Multi-line string values in the tag encoding are written as element
text instead of a ``value`` attribute.
=============================================================================
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..coerce import coerce_bool, coerce_float, coerce_int, coerce_str
from ..defaults import FIRST_PROPERTIES_WINS
from ..errors import DeserializationError
from ..reconcile import (
    dispatch, expect_list, expect_record, field_path, item_path,
    optional, required, take_first,
)
from ..xml_convert import TEXT_KEY


EMPTY_PROPERTIES: Mapping[str, "Property"] = MappingProxyType({})


@dataclass(frozen=True)
class Property:
    name: str                    # Property name (key)
    type: str = "string"         # Value type
    value: Any = None            # Converted value

    @classmethod
    def from_wire(cls, record: Any, path: str = "") -> 'Property':
        record = expect_record(record, path)
        name_path, name = required(record, path, "name")
        type_path, prop_type = optional(record, path, "type")
        prop_type = coerce_str(prop_type, type_path) if prop_type is not None else "string"

        value_path, value = optional(record, path, "value")
        if value is None:
            value = record.get(TEXT_KEY, "")

        return cls(
            name=coerce_str(name, name_path),
            type=prop_type,
            value=convert_value(prop_type, value, value_path),
        )


def convert_value(prop_type: str, value: Any, path: str = "") -> Any:
    """Convert a raw property value according to its declared type."""
    if prop_type == "int":
        return coerce_int(value, path)
    if prop_type == "float":
        return coerce_float(value, path)
    if prop_type == "bool":
        return coerce_bool(value, path)
    return value


def _from_records(value: Any, path: str) -> Dict[str, Property]:
    records = expect_list(value, path)
    props: Dict[str, Property] = {}
    for index, record in enumerate(records):
        prop = Property.from_wire(record, item_path(path, index))
        props[prop.name] = prop
    return props


def _from_wrapper(value: Any, path: str) -> Dict[str, Property]:
    wrapper_path = item_path(path, 0)
    wrapper = expect_record(take_first(value, path, FIRST_PROPERTIES_WINS), wrapper_path)
    if any(key in wrapper for key in ("name", "type", "value")):
        raise DeserializationError("expected a <properties> wrapper, got a property record", wrapper_path)
    records_path, records = optional(wrapper, wrapper_path, "property")
    return _from_records(records if records is not None else [], records_path)


def _from_mapping(value: Any, path: str, types: Optional[Dict[str, Any]], types_path: str) -> Dict[str, Property]:
    mapping = expect_record(value, path)
    types = expect_record(types, types_path) if types is not None else {}
    props: Dict[str, Property] = {}
    for name, raw in mapping.items():
        prop_type = coerce_str(types.get(name, "string"), field_path(types_path, name))
        props[name] = Property(name=name, type=prop_type,
                               value=convert_value(prop_type, raw, field_path(path, name)))
    return props


def parse_properties(record: Dict[str, Any], path: str = "") -> Mapping[str, Property]:
    """
    Properties of ``record``, keyed by name in wire order. Empty if absent.

    The result is a read-only mapping.
    """
    props_path, value = optional(record, path, "properties")
    if value is None:
        return EMPTY_PROPERTIES

    if isinstance(value, dict):
        types_path, types = optional(record, path, "propertytypes")
        return MappingProxyType(_from_mapping(value, props_path, types, types_path))

    return MappingProxyType(dispatch(value, props_path, "properties", [
        ("records", lambda v: _from_records(v, props_path)),
        ("wrapper", lambda v: _from_wrapper(v, props_path)),
    ]).value)
