"""
Scalar coercers - loosely typed wire values to strict Python types.

=============================================================================
WHY COERCE?
=============================================================================

The two wire encodings disagree on how scalars are spelled:

    key-value:  "tilewidth": 32       "visible": true
    tag:        tilewidth="32"        visible="1"

After structural conversion, the tag encoding carries EVERY attribute as
text, so each numeric or boolean field has to accept both the native
value and its string spelling. Anything that is neither fails with a
CoercionError naming the field.

=============================================================================
ROUNDING
=============================================================================

Geometry fields (object positions, sizes, point coordinates) are written
as floats by the authoring tool but modelled as integers. They are
rounded with Python's built-in ``round()`` (round-half-to-even), so
``round(0.5) == 0`` and ``round(1.5) == 2``.

=============================================================================
"""

import math
import re
from typing import Any, Optional

from .errors import CoercionError


_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*\Z")

TRUE_SPELLINGS = frozenset({"true", "1", "yes"})
FALSE_SPELLINGS = frozenset({"false", "0", "no"})


def _type_name(value: Any) -> str:
    return type(value).__name__


def coerce_int(value: Any, path: str = "", minimum: Optional[int] = None) -> int:
    """
    Integer from a number or a numeric string.

    Integral floats (``16.0``) are accepted; fractional ones are not.
    ``minimum`` rejects values below it (0 for unsigned wire fields).
    """
    # bool is a subclass of int but never a number on the wire
    if isinstance(value, bool):
        raise CoercionError(f"expected an integer, got boolean {value!r}", path, value)

    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise CoercionError(f"expected an integer, got {value!r}", path, value)
        result = int(value)
    elif isinstance(value, str):
        if not _INT_RE.match(value):
            raise CoercionError(f"invalid integer literal {value!r}", path, value)
        try:
            result = int(value)
        except ValueError:
            # over the interpreter's integer string conversion limit
            raise CoercionError(f"integer literal of {len(value)} characters is too long", path, value) from None
    else:
        raise CoercionError(f"expected an integer, got {_type_name(value)}", path, value)

    if minimum is not None and result < minimum:
        raise CoercionError(f"{result} is below the minimum of {minimum}", path, value)
    return result


def coerce_float(value: Any, path: str = "") -> float:
    """Float from a number or a numeric string."""
    if isinstance(value, bool):
        raise CoercionError(f"expected a number, got boolean {value!r}", path, value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        # float() tolerates digit separators, the wire format does not
        if "_" in value:
            raise CoercionError(f"invalid float literal {value!r}", path, value)
        try:
            return float(value)
        except ValueError:
            raise CoercionError(f"invalid float literal {value!r}", path, value) from None
    raise CoercionError(f"expected a number, got {_type_name(value)}", path, value)


def coerce_round_int(value: Any, path: str = "") -> int:
    """
    Integer from an int, a float, or a string holding a float.

    Floats are rounded to the nearest integer; ints pass through untouched.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    number = coerce_float(value, path)
    if math.isnan(number) or math.isinf(number):
        raise CoercionError(f"{value!r} cannot be rounded to an integer", path, value)
    return round(number)


def coerce_bool(value: Any, path: str = "") -> bool:
    """
    Boolean from a native bool, 0/1, or a textual spelling.

    Accepted spellings (case-insensitive):

        true:  true   1  yes
        false: false  0  no
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False
        raise CoercionError(f"{value!r} is not a boolean", path, value)

    if isinstance(value, str):
        spelling = value.strip().lower()
        if spelling in TRUE_SPELLINGS:
            return True
        if spelling in FALSE_SPELLINGS:
            return False
        raise CoercionError(f"unrecognized boolean spelling {value!r}", path, value)

    raise CoercionError(f"expected a boolean, got {_type_name(value)}", path, value)


def coerce_str(value: Any, path: str = "") -> str:
    if isinstance(value, str):
        return value
    raise CoercionError(f"expected a string, got {_type_name(value)}", path, value)
