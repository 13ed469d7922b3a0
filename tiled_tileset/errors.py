"""
Exceptions raised while normalizing a tileset document.

Every error records WHERE it happened as a dotted path into the
key-value tree (for example ``tiles[2].animation[0].duration``), so a
failure in a large tileset can be traced back to the offending record.

    TilesetError
    ├── EncodingError          input bytes are not UTF-8
    ├── ConversionError        tag markup could not be converted
    └── DeserializationError   tree does not have the expected shape
        └── CoercionError      a scalar could not be converted
"""

from typing import Any


class TilesetError(Exception):
    """Base class for every failure reported by this package."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
        self.message = message


class EncodingError(TilesetError):
    """The byte buffer handed to a ``*_bytes`` entry point is not UTF-8."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class ConversionError(TilesetError):
    """The tag encoding could not be turned into a key-value tree."""

    def __init__(self, message: str, line: int = 0, col: int = 0):
        super().__init__(message)
        self.line = line
        self.col = col


class DeserializationError(TilesetError):
    """A record is missing a required field or matches no known shape."""


class CoercionError(DeserializationError):
    """A wire scalar cannot be converted to its target type."""

    def __init__(self, message: str, path: str = "", value: Any = None):
        super().__init__(message, path)
        self.value = value
