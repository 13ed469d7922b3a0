"""
Image reference used by tilesets and by tiles of image-collection tilesets.

=============================================================================
WIRE SHAPES
=============================================================================

The same image arrives in two shapes, told apart by the type of the
"image" field:

    (a) attribute container (tag encoding):
        "image": [{"source": "terrain.png", "trans": "ff00ff",
                   "width": "256", "height": "256"}]

    (b) flat fields (key-value encoding), next to the owner's own fields:
        "image": "terrain.png", "imagewidth": 256, "imageheight": 256,
        "transparentcolor": "#ff00ff"

Both collapse into one ``Image``; the record does not remember its shape.
Only the first element of (a) is used (FIRST_IMAGE_WINS) and an empty
container is rejected.
=============================================================================
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..coerce import coerce_int, coerce_str
from ..defaults import FIRST_IMAGE_WINS
from ..errors import DeserializationError
from ..reconcile import dispatch, expect_record, item_path, optional, required, take_first


@dataclass(frozen=True)
class Image:
    source: str                                # Path to image file
    transparent_color: Optional[str] = None    # Color treated as transparent
    width: int = 0                             # Image width (pixels)
    height: int = 0                            # Image height (pixels)

    @classmethod
    def from_attributes(cls, container: Any, path: str = "image") -> 'Image':
        """Shape (a): single-element list of attribute records."""
        if not isinstance(container, list):
            raise DeserializationError("expected an attribute container", path)

        attr_path = item_path(path, 0)
        attrs = expect_record(take_first(container, path, FIRST_IMAGE_WINS), attr_path)

        source_path, source = required(attrs, attr_path, "source")
        trans_path, trans = optional(attrs, attr_path, "trans")
        width_path, width = required(attrs, attr_path, "width")
        height_path, height = required(attrs, attr_path, "height")

        return cls(
            source=coerce_str(source, source_path),
            transparent_color=coerce_str(trans, trans_path) if trans is not None else None,
            width=coerce_int(width, width_path, minimum=0),
            height=coerce_int(height, height_path, minimum=0),
        )

    @classmethod
    def from_flat_fields(cls, record: Dict[str, Any], path: str = "") -> 'Image':
        """Shape (b): ``image``/``imagewidth``/``imageheight`` beside the owner's fields."""
        source_path, source = required(record, path, "image")
        if not isinstance(source, str):
            raise DeserializationError("expected an image path", source_path)

        width_path, width = required(record, path, "imagewidth")
        height_path, height = required(record, path, "imageheight")
        trans_path, trans = optional(record, path, "transparentcolor")

        return cls(
            source=source,
            transparent_color=coerce_str(trans, trans_path) if trans is not None else None,
            width=coerce_int(width, width_path, minimum=0),
            height=coerce_int(height, height_path, minimum=0),
        )

    @classmethod
    def from_wire(cls, record: Dict[str, Any], path: str = "") -> Optional['Image']:
        """
        Image carried by ``record`` (a tileset or tile), or None.

        None only when there is no "image" field at all. An "image" field
        that fits neither shape is an error.
        """
        record = expect_record(record, path)
        if "image" not in record:
            return None

        image_path, _ = required(record, path, "image")
        return dispatch(record, image_path, "image", [
            ("attribute container", lambda r: cls.from_attributes(r["image"], image_path)),
            ("flat fields", lambda r: cls.from_flat_fields(r, path)),
        ]).value
