"""
Tileset and Tile - the top of the normalized model.

=============================================================================
TILESET TYPES
=============================================================================

1. SPRITESHEET TILESET (most common):
   One large image divided into a grid of tiles.

   +---+---+---+---+
   | 0 | 1 | 2 | 3 |
   +---+---+---+---+
   | 4 | 5 | 6 | 7 |
   +---+---+---+---+

   ``Tileset.image`` is set; ``tiles`` only lists tiles that carry extra
   data (animation, collision shapes, properties).

2. IMAGE COLLECTION TILESET:
   Each tile is a separate image file. ``Tileset.image`` is None and
   every ``Tile.image`` is set.

=============================================================================
ENTRY POINTS
=============================================================================

    Tileset.from_json(text)        key-value encoding (.tsj / .json)
    Tileset.from_json_data(buf)    same, from UTF-8 bytes
    Tileset.from_xml(text)         tag encoding (.tsx)
    Tileset.from_xml_data(buf)     same, from UTF-8 bytes

Each call builds a new, independent value graph. Nothing is shared
between calls and no input is retained.
=============================================================================
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ..coerce import coerce_int, coerce_round_int, coerce_str
from ..defaults import DEFAULTS, FIRST_TILE_OFFSET_WINS, FIRST_TILESET_WINS, Defaults
from ..errors import DeserializationError, EncodingError
from ..reconcile import (
    expect_record, field_path, item_path, optional, record_or_first, required, take_first,
)
from ..xml_convert import to_keyvalue_tree
from .animation import Frame, parse_animation
from .image import Image
from .metadata import Metadata
from .objects import ObjectLayer
from .properties import EMPTY_PROPERTIES, Property, parse_properties


logger = logging.getLogger(__name__)


def _decode(buf: bytes) -> str:
    try:
        return bytes(buf).decode("utf-8")
    except UnicodeDecodeError as err:
        raise EncodingError(f"input is not valid UTF-8: {err.reason} at byte {err.start}",
                            position=err.start) from err


# =============================================================================
# TILE OFFSET
# =============================================================================

@dataclass(frozen=True)
class TileOffset:
    """Pixel offset applied when drawing tiles of this tileset."""
    x: int = 0
    y: int = 0

    @classmethod
    def from_wire(cls, value: Any, path: str = "") -> 'TileOffset':
        path, record = record_or_first(value, path, FIRST_TILE_OFFSET_WINS)
        x_path, x = optional(record, path, "x")
        y_path, y = optional(record, path, "y")
        return cls(
            x=coerce_round_int(x, x_path) if x is not None else 0,
            y=coerce_round_int(y, y_path) if y is not None else 0,
        )


# =============================================================================
# TILE
# =============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Individual tile within a tileset.

    The ``id`` is LOCAL to the tileset. Uniqueness is not checked here.
    """
    id: int                                          # Local tile ID
    type: str = ""                                   # Tile type/class
    image: Optional[Image] = None                    # Image (collection tilesets)
    objects: Optional[ObjectLayer] = None            # Collision shapes
    animation: Tuple[Frame, ...] = ()                # Empty = static tile
    properties: Mapping[str, Property] = field(default_factory=lambda: EMPTY_PROPERTIES, hash=False)

    @property
    def is_animated(self) -> bool:
        return bool(self.animation)

    @classmethod
    def from_wire(cls, record: Any, path: str = "", defaults: Defaults = DEFAULTS) -> 'Tile':
        record = expect_record(record, path)
        id_path, tile_id = required(record, path, "id")
        type_path, tile_type = optional(record, path, "type", "class")
        group_path, group = optional(record, path, "objectgroup")

        return cls(
            id=coerce_int(tile_id, id_path, minimum=0),
            type=coerce_str(tile_type, type_path) if tile_type is not None else "",
            image=Image.from_wire(record, path),
            objects=ObjectLayer.from_wire(group, group_path, defaults) if group is not None else None,
            animation=parse_animation(record, path),
            properties=parse_properties(record, path),
        )


def _parse_tiles(value: Any, path: str, defaults: Defaults) -> Tuple[Tile, ...]:
    if isinstance(value, dict):
        # legacy key-value files: {"<id>": {...tile without id...}}
        tiles = []
        for key, record in value.items():
            record = expect_record(record, field_path(path, key))
            if "id" not in record:
                record = dict(record, id=key)
            tiles.append(Tile.from_wire(record, field_path(path, key), defaults))
        return tuple(tiles)

    if not isinstance(value, list):
        raise DeserializationError(f"expected a sequence of tiles, got {type(value).__name__}", path)
    return tuple(Tile.from_wire(record, item_path(path, index), defaults)
                 for index, record in enumerate(value))


# =============================================================================
# TILESET
# =============================================================================

@dataclass(frozen=True)
class Tileset:
    """
    A named catalogue of tiles.

    ``columns * tile_rows`` is not checked against ``tile_count``; that
    is left to consumers.
    """
    name: str                                        # Tileset name
    tile_width: int                                  # Tile width in pixels
    tile_height: int                                 # Tile height in pixels
    tile_count: int                                  # Total number of tiles
    columns: int                                     # Tiles per row
    spacing: int = 0                                 # Pixels between tiles
    margin: int = 0                                  # Pixels around edge
    background_color: Optional[str] = None           # Editor background color
    metadata: Optional[Metadata] = None              # Document attributes
    image: Optional[Image] = None                    # Spritesheet image
    tile_offset: Optional[TileOffset] = None         # Drawing offset
    tiles: Tuple[Tile, ...] = ()                     # Tiles with extra data
    properties: Mapping[str, Property] = field(default_factory=lambda: EMPTY_PROPERTIES, hash=False)

    @property
    def tile_rows(self) -> int:
        if not self.columns:
            return 0
        return math.ceil(self.tile_count / self.columns)

    def get_tile(self, tile_id: int) -> Optional[Tile]:
        """First tile with local ID ``tile_id``, or None if it has no entry."""
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        return None

    @classmethod
    def from_wire(cls, record: Any, path: str = "", defaults: Defaults = DEFAULTS) -> 'Tileset':
        """Build a tileset from an already-parsed key-value record."""
        record = expect_record(record, path)

        name_path, name = required(record, path, "name")
        tw_path, tile_width = required(record, path, "tilewidth")
        th_path, tile_height = required(record, path, "tileheight")
        count_path, tile_count = required(record, path, "tilecount")
        columns_path, columns = required(record, path, "columns")
        spacing_path, spacing = optional(record, path, "spacing")
        margin_path, margin = optional(record, path, "margin")
        bg_path, background = optional(record, path, "backgroundcolor")
        offset_path, offset = optional(record, path, "tileoffset")
        tiles_path, tiles = optional(record, path, "tiles", "tile")

        return cls(
            name=coerce_str(name, name_path),
            tile_width=coerce_int(tile_width, tw_path, minimum=0),
            tile_height=coerce_int(tile_height, th_path, minimum=0),
            tile_count=coerce_int(tile_count, count_path, minimum=0),
            columns=coerce_int(columns, columns_path, minimum=0),
            spacing=coerce_int(spacing, spacing_path, minimum=0) if spacing is not None else defaults.spacing,
            margin=coerce_int(margin, margin_path, minimum=0) if margin is not None else defaults.margin,
            background_color=coerce_str(background, bg_path) if background is not None else None,
            metadata=Metadata.from_wire(record, path),
            image=Image.from_wire(record, path),
            tile_offset=TileOffset.from_wire(offset, offset_path) if offset is not None else None,
            tiles=_parse_tiles(tiles, tiles_path, defaults) if tiles is not None else (),
            properties=parse_properties(record, path),
        )

    # -------------------------------------------------------------------------
    # KEY-VALUE ENCODING
    # -------------------------------------------------------------------------

    @classmethod
    def from_json(cls, text: str, defaults: Defaults = DEFAULTS) -> 'Tileset':
        """
        Parse a tileset from key-value (JSON) text.

        Raises:
        -------
        DeserializationError : Malformed text or unexpected document shape
        CoercionError        : A field value cannot be converted
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as err:
            raise DeserializationError(
                f"malformed key-value document: {err.msg} (line {err.lineno}, column {err.colno})"
            ) from err
        except ValueError as err:
            # integer literals beyond the interpreter's digit limit
            raise DeserializationError(f"malformed key-value document: {err}") from err
        except RecursionError:
            raise DeserializationError("malformed key-value document: nested too deeply") from None

        tileset = cls.from_wire(document, "", defaults)
        logger.debug("parsed key-value tileset %r with %d tile(s)", tileset.name, len(tileset.tiles))
        return tileset

    @classmethod
    def from_json_data(cls, buf: bytes, defaults: Defaults = DEFAULTS) -> 'Tileset':
        """Like ``from_json`` for a UTF-8 byte buffer; raises EncodingError first."""
        return cls.from_json(_decode(buf), defaults)

    # -------------------------------------------------------------------------
    # TAG ENCODING
    # -------------------------------------------------------------------------

    @classmethod
    def from_xml(cls, text: str, defaults: Defaults = DEFAULTS) -> 'Tileset':
        """
        Parse a tileset from tag-encoded (TSX) text.

        The markup is first converted to a key-value tree holding a list
        of tilesets; only the first one is returned (FIRST_TILESET_WINS).

        Raises:
        -------
        ConversionError      : Malformed markup
        DeserializationError : No <tileset> root, or unexpected shape
        CoercionError        : A field value cannot be converted
        """
        document = to_keyvalue_tree(text)
        tilesets_path, tilesets = required(document, "", "tileset")
        record = take_first(tilesets, tilesets_path, FIRST_TILESET_WINS)

        tileset = cls.from_wire(record, item_path(tilesets_path, 0), defaults)
        logger.debug("parsed tag-encoded tileset %r with %d tile(s)", tileset.name, len(tileset.tiles))
        return tileset

    @classmethod
    def from_xml_data(cls, buf: bytes, defaults: Defaults = DEFAULTS) -> 'Tileset':
        """Like ``from_xml`` for a UTF-8 byte buffer; raises EncodingError first."""
        return cls.from_xml(_decode(buf), defaults)


# =============================================================================
# MODULE-LEVEL ENTRY POINTS
# =============================================================================

def parse_keyvalue(text: str, defaults: Defaults = DEFAULTS) -> Tileset:
    return Tileset.from_json(text, defaults)


def parse_keyvalue_bytes(buf: bytes, defaults: Defaults = DEFAULTS) -> Tileset:
    return Tileset.from_json_data(buf, defaults)


def parse_tagged(text: str, defaults: Defaults = DEFAULTS) -> Tileset:
    return Tileset.from_xml(text, defaults)


def parse_tagged_bytes(buf: bytes, defaults: Defaults = DEFAULTS) -> Tileset:
    return Tileset.from_xml_data(buf, defaults)
