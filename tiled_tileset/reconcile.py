"""
Record access and shape-based dispatch over the key-value tree.

=============================================================================
SHAPE-BASED DISPATCH
=============================================================================

Neither wire encoding says WHICH shape a value has. A tileset image, for
example, is one of:

    tag:        "image": [{"source": "a.png", "width": "64", ...}]
    key-value:  "image": "a.png", "imagewidth": 64, ...

``dispatch()`` tries every candidate shape in turn. Exactly one must
accept the value:

    none accept  -> DeserializationError listing why each one refused,
                    or the CoercionError of the one shape that only
                    failed on a scalar value
    two accept   -> DeserializationError (ambiguous input)
    one accepts  -> Variant(kind, result)

The ``kind`` tag stays internal; callers collapse the Variant to the
canonical record before returning it.
=============================================================================
"""

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .errors import CoercionError, DeserializationError


logger = logging.getLogger(__name__)

_MISSING = object()


class Variant(NamedTuple):
    kind: str
    value: Any


Shape = Tuple[str, Callable[[Any], Any]]


def field_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def item_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


def expect_record(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DeserializationError(f"expected a record, got {type(value).__name__}", path)
    return value


def expect_list(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise DeserializationError(f"expected a sequence, got {type(value).__name__}", path)
    return value


def lookup(record: Dict[str, Any], keys: Sequence[str]) -> Tuple[Optional[str], Any]:
    """Return ``(key, value)`` for the first of ``keys`` present in ``record``."""
    for key in keys:
        if key in record:
            return key, record[key]
    return None, _MISSING


def required(record: Dict[str, Any], path: str, *keys: str) -> Tuple[str, Any]:
    """
    Value of a mandatory field, with the path that leads to it.

    ``keys`` lists the field name followed by its aliases.
    """
    key, value = lookup(record, keys)
    if key is None:
        raise DeserializationError(f"missing field {keys[0]!r}", path)
    return field_path(path, key), value


def optional(record: Dict[str, Any], path: str, *keys: str) -> Tuple[str, Any]:
    """Like ``required`` but yields ``(path, None)`` when absent."""
    key, value = lookup(record, keys)
    if key is None:
        return field_path(path, keys[0]), None
    return field_path(path, key), value


def take_first(container: Any, path: str, policy: str) -> Any:
    """
    First element of a container written by the tag encoding.

    Extra elements are dropped under ``policy``. An empty container is an
    error, never a silently absent value.
    """
    items = expect_list(container, path)
    if not items:
        raise DeserializationError(f"empty container ({policy})", path)
    if len(items) > 1:
        logger.debug("%s: discarding %d extra element(s), %s", path, len(items) - 1, policy)
    return items[0]


def record_or_first(value: Any, path: str, policy: str) -> Tuple[str, Dict[str, Any]]:
    """A bare record (key-value) or a single-element container of one (tag)."""
    if isinstance(value, list):
        return item_path(path, 0), expect_record(take_first(value, path, policy), item_path(path, 0))
    return path, expect_record(value, path)


def dispatch(value: Any, path: str, what: str, shapes: Sequence[Shape]) -> Variant:
    """Interpret ``value`` as exactly one of ``shapes``."""
    matches = []
    refusals = []
    for kind, parse in shapes:
        try:
            matches.append(Variant(kind, parse(value)))
        except DeserializationError as err:
            refusals.append((kind, err))

    if not matches:
        # a shape that only failed on a scalar did match structurally
        coercions = [err for _, err in refusals if isinstance(err, CoercionError)]
        if len(coercions) == 1:
            raise coercions[0]
        reasons = "; ".join(f"as {kind}: {err}" for kind, err in refusals)
        raise DeserializationError(f"{what} matches no known shape ({reasons})", path)
    if len(matches) > 1:
        kinds = ", ".join(match.kind for match in matches)
        raise DeserializationError(f"{what} is ambiguous, matches {kinds}", path)

    logger.debug("%s: %s reconciled as %s", path or "<root>", what, matches[0].kind)
    return matches[0]
