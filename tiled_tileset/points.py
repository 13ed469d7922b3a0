"""
Point-list parsing for polygon and polyline objects.

The tag encoding stores vertices as one attribute:

    <polygon points="0,0 32,0 32,16.5 0,16"/>

while the key-value encoding stores a sequence of records:

    "polygon": [{"x": 0, "y": 0}, {"x": 32, "y": 0}, ...]

Both become an ordered tuple of integer pairs. Vertex order is kept as
written: it defines the outline of the shape.
"""

from typing import Any, Tuple

from .coerce import coerce_float, coerce_round_int
from .errors import CoercionError, DeserializationError


Vertex = Tuple[int, int]


def parse_point_list(text: str, path: str = "", allow_empty: bool = True) -> Tuple[Vertex, ...]:
    """
    Parse ``"x,y x,y ..."`` into ``((x, y), (x, y), ...)``.

    Coordinates are parsed as floats and rounded. Any malformed pair
    fails the whole list; no partial result is returned.
    """
    if not isinstance(text, str):
        raise CoercionError('expected a string in the format "x,y x,y ..."', path, text)

    pairs = text.split()
    if not pairs:
        if allow_empty:
            return ()
        raise CoercionError("empty point list", path, text)

    points = []
    for index, pair in enumerate(pairs):
        pair_path = f"{path}[{index}]"
        xs, sep, ys = pair.partition(",")
        if not sep or not xs or not ys:
            raise CoercionError(f'malformed coordinate pair {pair!r}, expected "x,y"', pair_path, text)
        x = coerce_float(xs, pair_path)
        y = coerce_float(ys, pair_path)
        points.append((coerce_round_int(x, pair_path), coerce_round_int(y, pair_path)))

    return tuple(points)


def parse_point_records(records: Any, path: str = "", allow_empty: bool = True) -> Tuple[Vertex, ...]:
    """Parse ``[{"x": 0, "y": 0}, ...]`` into integer pairs."""
    if not isinstance(records, list):
        raise DeserializationError("expected a list of {x, y} records", path)
    if not records and not allow_empty:
        raise CoercionError("empty point list", path, records)

    points = []
    for index, record in enumerate(records):
        item_path = f"{path}[{index}]"
        if not isinstance(record, dict) or "x" not in record or "y" not in record:
            raise DeserializationError("expected an {x, y} record", item_path)
        points.append((
            coerce_round_int(record["x"], f"{item_path}.x"),
            coerce_round_int(record["y"], f"{item_path}.y"),
        ))
    return tuple(points)


def parse_points(value: Any, path: str = "", allow_empty: bool = True) -> Tuple[Vertex, ...]:
    """Either point-list shape: delimited text or a list of records."""
    if isinstance(value, str):
        return parse_point_list(value, path, allow_empty)
    return parse_point_records(value, path, allow_empty)
