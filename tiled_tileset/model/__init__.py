"""Normalized tileset model"""

from .animation import Frame, parse_animation
from .image import Image
from .metadata import Metadata
from .objects import Ellipse, Object, ObjectLayer, ObjectType, Point, Polygon, Polyline
from .properties import Property, parse_properties
from .tileset import (
    Tile, TileOffset, Tileset,
    parse_keyvalue, parse_keyvalue_bytes, parse_tagged, parse_tagged_bytes,
)

__all__ = [
    "Frame", "Image", "Metadata", "Property",
    "Ellipse", "Object", "ObjectLayer", "ObjectType", "Point", "Polygon", "Polyline",
    "Tile", "TileOffset", "Tileset",
    "parse_animation", "parse_properties",
    "parse_keyvalue", "parse_keyvalue_bytes", "parse_tagged", "parse_tagged_bytes",
]
