"""Document-level attributes shared by every Tiled file."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..coerce import coerce_str
from ..reconcile import optional


@dataclass(frozen=True)
class Metadata:
    version: str                                     # Format version ("1.10")
    tiled_version: Optional[str] = None              # Editor version that wrote the file

    @classmethod
    def from_wire(cls, record: Dict[str, Any], path: str = "") -> Optional['Metadata']:
        """Metadata of ``record``, or None when it carries no version."""
        version_path, version = optional(record, path, "version")
        if version is None:
            return None

        # old key-value files write the version as a number (1.2)
        if isinstance(version, (int, float)) and not isinstance(version, bool):
            version = str(version)

        tiled_path, tiled_version = optional(record, path, "tiledversion")
        return cls(
            version=coerce_str(version, version_path),
            tiled_version=coerce_str(tiled_version, tiled_path) if tiled_version is not None else None,
        )
