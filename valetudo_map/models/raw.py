# valetudo_map/models/raw.py
"""
Pydantic models for the raw map telemetry served by the robot
(GET /api/v2/robot/state/map).

Field names and aliases follow the firmware JSON verbatim. Everything is
optional here; what is required is decided by the builder, not the schema.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class _RawModel(BaseModel):
    # The firmware adds fields between releases; ignore what we don't read.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RawSize(_RawModel):
    x: Optional[int] = None
    y: Optional[int] = None


class RawDimensionRange(_RawModel):
    min: Optional[int] = None
    max: Optional[int] = None
    mid: Optional[int] = None


class RawDimensions(_RawModel):
    """Per-layer bounding box as reported by the firmware (pixel units)."""
    x: Optional[RawDimensionRange] = None
    y: Optional[RawDimensionRange] = None


class RawLayerMetaData(_RawModel):
    segment_id: Optional[str] = Field(default=None, alias="segmentId")
    name: Optional[str] = None
    active: Optional[bool] = None
    area: Optional[Number] = None


class RawLayer(_RawModel):
    """
    One map layer:
    - type: discriminator tag ("floor", "wall", "segment", ...)
    - pixels: flat [x0, y0, x1, y1, ...] when sent expanded
    - compressed_pixels: flat [x, y, count, ...] run-length triples
    """
    layer_class: Optional[str] = Field(default=None, alias="__class")
    type: Optional[str] = None
    pixels: Optional[List[int]] = None
    compressed_pixels: Optional[List[int]] = Field(default=None, alias="compressedPixels")
    meta_data: Optional[RawLayerMetaData] = Field(default=None, alias="metaData")
    dimensions: Optional[RawDimensions] = None


class RawEntityMetaData(_RawModel):
    # degrees; rounded to an integer by the builder
    angle: Optional[Number] = None


class RawEntity(_RawModel):
    entity_class: Optional[str] = Field(default=None, alias="__class")
    type: Optional[str] = None
    points: Optional[List[Number]] = None
    meta_data: Optional[RawEntityMetaData] = Field(default=None, alias="metaData")


class RawMapTelemetry(_RawModel):
    """
    A complete map snapshot, as fetched by the network client.

    Layers and entities stay plain dicts at this level: each item is checked
    against RawLayer / RawEntity only once its type tag is known, so an item
    of a type this version does not understand cannot fail the snapshot.
    """
    size: Optional[RawSize] = None
    pixel_size: Optional[Number] = Field(default=None, alias="pixelSize")
    layers: Optional[List[Dict[str, Any]]] = None
    entities: Optional[List[Dict[str, Any]]] = None
