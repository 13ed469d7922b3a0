"""
Tiled tileset loader - one model for both tileset encodings

Reads a tileset written by the Tiled map editor either as JSON (.tsj) or
as XML (.tsx) and returns the same immutable ``Tileset`` value:

    from tiled_tileset import parse_keyvalue, parse_tagged

    tileset = parse_tagged(open("terrain.tsx", encoding="utf-8").read())
    for tile in tileset.tiles:
        if tile.is_animated:
            ...
"""

from .defaults import (
    DEFAULTS, Defaults,
    FIRST_ANIMATION_WINS, FIRST_IMAGE_WINS, FIRST_OBJECT_LAYER_WINS, FIRST_TILESET_WINS,
)
from .errors import (
    CoercionError, ConversionError, DeserializationError, EncodingError, TilesetError,
)
from .model import (
    Ellipse, Frame, Image, Metadata, Object, ObjectLayer, ObjectType, Point,
    Polygon, Polyline, Property, Tile, TileOffset, Tileset,
    parse_keyvalue, parse_keyvalue_bytes, parse_tagged, parse_tagged_bytes,
)
from .xml_convert import to_keyvalue_tree

__version__ = "0.1.0"
__all__ = [
    "parse_keyvalue",
    "parse_keyvalue_bytes",
    "parse_tagged",
    "parse_tagged_bytes",
    "to_keyvalue_tree",
    "Tileset",
    "Tile",
    "TileOffset",
    "Image",
    "Frame",
    "Metadata",
    "Property",
    "Object",
    "ObjectLayer",
    "ObjectType",
    "Ellipse",
    "Point",
    "Polygon",
    "Polyline",
    "Defaults",
    "DEFAULTS",
    "FIRST_IMAGE_WINS",
    "FIRST_ANIMATION_WINS",
    "FIRST_OBJECT_LAYER_WINS",
    "FIRST_TILESET_WINS",
    "TilesetError",
    "EncodingError",
    "ConversionError",
    "DeserializationError",
    "CoercionError",
]
