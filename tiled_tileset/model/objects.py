"""
Objects and object layers.

Inside a tileset, object layers hold a tile's collision shapes:

    <tile id="3">
        <objectgroup draworder="index" id="2">
            <object id="1" x="0" y="16" width="32" height="16"/>
            <object id="2" x="4" y="4">
                <polygon points="0,0 8,0 8,8"/>
            </object>
        </objectgroup>
    </tile>

=============================================================================
OBJECT SHAPES
=============================================================================

An object is a rectangle (x, y, width, height) unless one shape marker
is present:

    marker      tag encoding                       key-value encoding
    ---------   --------------------------------   --------------------------
    ellipse     <ellipse/>                         "ellipse": true
    point       <point/>                           "point": true
    polygon     <polygon points="0,0 8,0 8,8"/>    "polygon": [{"x":0,"y":0}, ...]
    polyline    <polyline points="0,0 8,8"/>       "polyline": [{"x":0,"y":0}, ...]

More than one marker on the same object is rejected.
=============================================================================
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ..coerce import coerce_bool, coerce_float, coerce_int, coerce_round_int, coerce_str
from ..defaults import DEFAULTS, FIRST_OBJECT_LAYER_WINS, FIRST_SHAPE_WINS, Defaults
from ..errors import DeserializationError
from ..points import Vertex, parse_point_list, parse_point_records
from ..reconcile import (
    dispatch, expect_list, expect_record, item_path,
    optional, record_or_first, required,
)
from .properties import EMPTY_PROPERTIES, Property, parse_properties


# =============================================================================
# OBJECT TYPES
# =============================================================================

class ObjectType:
    """Non-rectangular shape of an object."""

    marker = ""

    @staticmethod
    def from_wire(record: Any, path: str = "", defaults: Defaults = DEFAULTS) -> Optional['ObjectType']:
        """
        Shape of the object ``record``, or None for a plain rectangle.

        Raises DeserializationError if more than one shape marker is present.
        """
        record = expect_record(record, path)
        shapes = []
        for shape_cls in (Ellipse, Point, Polygon, Polyline):
            marker_path, value = optional(record, path, shape_cls.marker)
            if value is None:
                continue
            shape = shape_cls.from_marker(value, marker_path, defaults)
            if shape is not None:
                shapes.append(shape)

        if len(shapes) > 1:
            markers = ", ".join(shape.marker for shape in shapes)
            raise DeserializationError(f"object has more than one shape marker: {markers}", path)
        return shapes[0] if shapes else None


def _marker_set(value: Any, path: str) -> bool:
    # tag encoding: <ellipse/> becomes [{}]
    if isinstance(value, list):
        return True
    return coerce_bool(value, path)


@dataclass(frozen=True)
class Ellipse(ObjectType):
    marker = "ellipse"

    @classmethod
    def from_marker(cls, value: Any, path: str, defaults: Defaults) -> Optional['Ellipse']:
        return cls() if _marker_set(value, path) else None


@dataclass(frozen=True)
class Point(ObjectType):
    marker = "point"

    @classmethod
    def from_marker(cls, value: Any, path: str, defaults: Defaults) -> Optional['Point']:
        return cls() if _marker_set(value, path) else None


def _points_attribute(value: Any, path: str, allow_empty: bool) -> Tuple[Vertex, ...]:
    attrs_path, attrs = record_or_first(value, path, FIRST_SHAPE_WINS)
    points_path, points = required(attrs, attrs_path, "points")
    return parse_point_list(points, points_path, allow_empty)


def _vertices(value: Any, path: str, defaults: Defaults) -> Tuple[Vertex, ...]:
    allow_empty = defaults.empty_points_valid
    return dispatch(value, path, "point list", [
        ("point records", lambda v: parse_point_records(v, path, allow_empty)),
        ("points attribute", lambda v: _points_attribute(v, path, allow_empty)),
    ]).value


@dataclass(frozen=True)
class Polygon(ObjectType):
    points: Tuple[Vertex, ...] = ()       # Vertices, closed outline
    marker = "polygon"

    @classmethod
    def from_marker(cls, value: Any, path: str, defaults: Defaults) -> 'Polygon':
        return cls(points=_vertices(value, path, defaults))


@dataclass(frozen=True)
class Polyline(ObjectType):
    points: Tuple[Vertex, ...] = ()       # Vertices, open outline
    marker = "polyline"

    @classmethod
    def from_marker(cls, value: Any, path: str, defaults: Defaults) -> 'Polyline':
        return cls(points=_vertices(value, path, defaults))


# =============================================================================
# OBJECT
# =============================================================================

@dataclass(frozen=True)
class Object:
    id: int                                          # Unique object ID
    name: str = ""                                   # Object name
    type: str = ""                                   # Object type/class
    x: int = 0                                       # X position (pixels)
    y: int = 0                                       # Y position (pixels)
    width: int = 0                                   # Width (0 for points)
    height: int = 0                                  # Height (0 for points)
    rotation: int = 0                                # Rotation in degrees
    visible: bool = True                             # Is object visible?
    gid: Optional[int] = None                        # Tile GID (for tile objects)
    shape: Optional[ObjectType] = None               # None = rectangle
    properties: Mapping[str, Property] = field(default_factory=lambda: EMPTY_PROPERTIES, hash=False)

    @classmethod
    def from_wire(cls, record: Any, path: str = "", defaults: Defaults = DEFAULTS) -> 'Object':
        record = expect_record(record, path)

        id_path, obj_id = required(record, path, "id")
        x_path, x = required(record, path, "x")
        y_path, y = required(record, path, "y")

        name_path, name = optional(record, path, "name")
        type_path, obj_type = optional(record, path, "type", "class")
        width_path, width = optional(record, path, "width")
        height_path, height = optional(record, path, "height")
        rotation_path, rotation = optional(record, path, "rotation")
        visible_path, visible = optional(record, path, "visible")
        gid_path, gid = optional(record, path, "gid")

        return cls(
            id=coerce_int(obj_id, id_path),
            name=coerce_str(name, name_path) if name is not None else "",
            type=coerce_str(obj_type, type_path) if obj_type is not None else "",
            x=coerce_round_int(x, x_path),
            y=coerce_round_int(y, y_path),
            width=coerce_round_int(width, width_path) if width is not None else defaults.width,
            height=coerce_round_int(height, height_path) if height is not None else defaults.height,
            rotation=coerce_round_int(rotation, rotation_path) if rotation is not None else defaults.rotation,
            visible=coerce_bool(visible, visible_path) if visible is not None else defaults.visible,
            gid=coerce_int(gid, gid_path, minimum=0) if gid is not None else None,
            shape=ObjectType.from_wire(record, path, defaults),
            properties=parse_properties(record, path),
        )


# =============================================================================
# OBJECT LAYER
# =============================================================================

@dataclass(frozen=True)
class ObjectLayer:
    """
    Object layer - a named, ordered group of objects.

    In a tileset it is attached to a tile and holds that tile's collision
    shapes. Objects keep their wire order (draw order "index" relies on it).
    """
    id: int                                          # Unique layer ID
    name: str = ""                                   # Layer name
    color: str = ""                                  # Display color in the editor
    offsetx: int = 0                                 # X pixel offset
    offsety: int = 0                                 # Y pixel offset
    draw_order: str = "topdown"                      # "topdown" or "index"
    visible: bool = True                             # Is layer visible?
    opacity: float = 1.0                             # Transparency
    objects: Tuple[Object, ...] = ()
    properties: Mapping[str, Property] = field(default_factory=lambda: EMPTY_PROPERTIES, hash=False)

    @classmethod
    def from_wire(cls, value: Any, path: str = "", defaults: Defaults = DEFAULTS) -> 'ObjectLayer':
        """
        Object layer from a record (key-value encoding) or from a
        single-element container of one (tag encoding, first layer wins).
        """
        path, record = record_or_first(value, path, FIRST_OBJECT_LAYER_WINS)

        id_path, layer_id = required(record, path, "id")
        name_path, name = optional(record, path, "name")
        color_path, color = optional(record, path, "color")
        offsetx_path, offsetx = optional(record, path, "offsetx")
        offsety_path, offsety = optional(record, path, "offsety")
        order_path, draw_order = optional(record, path, "draworder")
        visible_path, visible = optional(record, path, "visible")
        opacity_path, opacity = optional(record, path, "opacity")
        objects_path, objects = optional(record, path, "objects", "object")

        objects = expect_list(objects, objects_path) if objects is not None else []

        return cls(
            id=coerce_int(layer_id, id_path),
            name=coerce_str(name, name_path) if name is not None else "",
            color=coerce_str(color, color_path) if color is not None else "",
            offsetx=coerce_round_int(offsetx, offsetx_path) if offsetx is not None else defaults.offset,
            offsety=coerce_round_int(offsety, offsety_path) if offsety is not None else defaults.offset,
            draw_order=coerce_str(draw_order, order_path) if draw_order is not None else defaults.draw_order,
            visible=coerce_bool(visible, visible_path) if visible is not None else defaults.visible,
            opacity=coerce_float(opacity, opacity_path) if opacity is not None else defaults.opacity,
            objects=tuple(
                Object.from_wire(obj, item_path(objects_path, index), defaults)
                for index, obj in enumerate(objects)
            ),
            properties=parse_properties(record, path),
        )
