"""
Tile animations.

A tile has at most one animation: an ordered list of frames, each
showing a sibling tile for some time. The two encodings nest it
differently:

    key-value:  "animation": [{"tileid": 0, "duration": 100}, ...]

    tag:        "animation": [{"frame": [{"tileid": "0", "duration": "100"}, ...]}]

In the tag shape only the FIRST <animation> wrapper is read
(FIRST_ANIMATION_WINS); any others are dropped. A tile without an
animation field is static and gets an empty frame tuple.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Tuple

from ..coerce import coerce_int
from ..defaults import FIRST_ANIMATION_WINS
from ..errors import DeserializationError
from ..reconcile import (
    dispatch, expect_list, expect_record, item_path, optional, required, take_first,
)


@dataclass(frozen=True)
class Frame:
    tileid: int                  # Local ID of the tile shown in this frame
    duration: timedelta          # How long the frame is displayed

    @classmethod
    def from_wire(cls, record: Any, path: str = "") -> 'Frame':
        record = expect_record(record, path)
        tileid_path, tileid = required(record, path, "tileid")
        duration_path, duration = required(record, path, "duration")
        # wire unit is milliseconds
        millis = coerce_int(duration, duration_path, minimum=0)
        return cls(
            tileid=coerce_int(tileid, tileid_path, minimum=0),
            duration=timedelta(milliseconds=millis),
        )


def _frames(value: Any, path: str) -> Tuple[Frame, ...]:
    items = expect_list(value, path)
    return tuple(Frame.from_wire(item, item_path(path, index)) for index, item in enumerate(items))


def _first_wrapper(value: Any, path: str) -> Tuple[Frame, ...]:
    wrapper_path = item_path(path, 0)
    wrapper = expect_record(take_first(value, path, FIRST_ANIMATION_WINS), wrapper_path)
    if "tileid" in wrapper or "duration" in wrapper:
        raise DeserializationError("expected an <animation> wrapper, got a frame", wrapper_path)
    frames_path, frames = optional(wrapper, wrapper_path, "frames", "frame")
    if frames is None:
        return ()
    return _frames(frames, frames_path)


def parse_animation(record: Dict[str, Any], path: str = "") -> Tuple[Frame, ...]:
    """Frames of the tile ``record``; empty when it is not animated."""
    animation_path, value = optional(record, path, "animation")
    if value is None:
        return ()

    return dispatch(value, animation_path, "animation", [
        ("frame list", lambda v: _frames(v, animation_path)),
        ("animation wrappers", lambda v: _first_wrapper(v, animation_path)),
    ]).value
