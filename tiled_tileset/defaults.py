"""
Default values and container policies.

Fields that may be absent on the wire take their value from a
``Defaults`` table which is passed explicitly into every assembler.
Callers that need different defaults build their own table:

    from dataclasses import replace
    strict = replace(DEFAULTS, empty_points_valid=False)
    tileset = parse_keyvalue(text, defaults=strict)

=============================================================================
FIRST-WINS POLICIES
=============================================================================

The tag encoding wraps several values in containers that may hold more
than one element, although the authoring tool only ever writes one.
Only the first element is used; the rest are discarded:

    FIRST_IMAGE_WINS         <image> inside <tileset> or <tile>
    FIRST_ANIMATION_WINS     <animation> inside <tile>
    FIRST_OBJECT_LAYER_WINS  <objectgroup> inside <tile>
    FIRST_TILESET_WINS       <tileset> at document root
    FIRST_PROPERTIES_WINS    <properties> inside any element
    FIRST_TILE_OFFSET_WINS   <tileoffset> inside <tileset>
    FIRST_SHAPE_WINS         <polygon>/<polyline> inside <object>

An EMPTY container is never treated as "absent": it is a parse error.
=============================================================================
"""

from dataclasses import dataclass


FIRST_IMAGE_WINS = "first image wins"
FIRST_ANIMATION_WINS = "first animation wins"
FIRST_OBJECT_LAYER_WINS = "first object layer wins"
FIRST_TILESET_WINS = "first tileset wins"
FIRST_PROPERTIES_WINS = "first properties wrapper wins"
FIRST_TILE_OFFSET_WINS = "first tile offset wins"
FIRST_SHAPE_WINS = "first shape element wins"


@dataclass(frozen=True)
class Defaults:
    draw_order: str = "topdown"          # ObjectLayer.draw_order
    visible: bool = True                 # Object.visible, ObjectLayer.visible
    opacity: float = 1.0                 # ObjectLayer.opacity
    width: int = 0                       # Object.width
    height: int = 0                      # Object.height
    rotation: int = 0                    # Object.rotation (degrees)
    offset: int = 0                      # ObjectLayer.offsetx / offsety
    spacing: int = 0                     # Tileset.spacing
    margin: int = 0                      # Tileset.margin
    empty_points_valid: bool = True      # "" is a zero-vertex point list


DEFAULTS = Defaults()
