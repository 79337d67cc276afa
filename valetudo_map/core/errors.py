# valetudo_map/core/errors.py
"""
Decode errors. A failed decode never yields a partial MapDocument.
"""
from __future__ import annotations

from typing import Optional


class MapDecodeError(Exception):
    kind = "map_decode_error"


class MalformedGeometryError(MapDecodeError):
    """An entity's point count does not fit its kind."""
    kind = "malformed_geometry"

    def __init__(self, entity_type: str, count: int, expected: str, index: Optional[int] = None):
        self.entity_type = entity_type
        self.count = count
        self.expected = expected
        self.index = index
        where = f" (entity #{index})" if index is not None else ""
        super().__init__(
            f"{entity_type}{where}: got {count} point values, expected {expected}"
        )


class InvalidDimensionsError(MapDecodeError):
    kind = "invalid_dimensions"


class MalformedTelemetryError(MapDecodeError):
    """The telemetry does not match the map schema at all."""
    kind = "malformed_telemetry"
