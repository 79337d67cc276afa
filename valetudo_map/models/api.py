# valetudo_map/models/api.py
"""
Pydantic models for the local HTTP API (requests in pixel space, responses).
"""
from __future__ import annotations

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

from .. import config as C


class PixelPoint(BaseModel):
    x: int
    y: int


class BoundsModel(BaseModel):
    min_x: int
    max_x: int
    mid_x: int
    min_y: int
    max_y: int
    mid_y: int


class SizeModel(BaseModel):
    width: int
    height: int


class LayerSummary(BaseModel):
    """
    One decoded layer. Pixels are omitted; use /map/grid for the raster.
    - kind: raw tag ("floor", "wall", "segment" or whatever the firmware sent)
    - known: False when the tag is not one this version understands
    """
    kind: str
    known: bool
    segment_id: Optional[str] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    pixel_count: int
    bounds: Optional[BoundsModel] = None


class EntitySummary(BaseModel):
    kind: str
    known: bool
    points: List[Union[int, float]]
    angle: Optional[int] = None


class MapDocumentResponse(BaseModel):
    version: int
    size: Optional[SizeModel] = None
    pixel_size_mm: Optional[Union[int, float]] = None
    layers: List[LayerSummary]
    entities: List[EntitySummary]


class SegmentInfoModel(BaseModel):
    segment_id: str
    name: str
    active: bool
    label: PixelPoint
    pixel_count: int


class SegmentListResponse(BaseModel):
    segments: List[SegmentInfoModel]


class SegmentAtResponse(BaseModel):
    x: int
    y: int
    segment_id: Optional[str] = None


class MapGridResponse(BaseModel):
    """
    Label raster of the decoded layers:
    - (origin_x, origin_y): pixel coordinate of data[0]
    - data: row-major labels, width*height values
    - labels: segment_id -> label value, plus floor/wall
    """
    width: int
    height: int
    origin_x: int
    origin_y: int
    labels: Dict[str, int]
    data: List[int]


class StatusResponse(BaseModel):
    version: int
    has_document: bool
    decode_failures: int
    last_error: Optional[str] = None


# ---- command requests (pixel space) ----

def _iterations_field():
    return Field(default=C.DEFAULT_ITERATIONS, description="Cleaning passes")


class GoToPixelRequest(BaseModel):
    x: int
    y: int


class PixelZone(BaseModel):
    a: PixelPoint
    b: PixelPoint
    iterations: int = _iterations_field()


class ZoneCleanPixelRequest(BaseModel):
    zones: List[PixelZone]


class SegmentCleanPixelRequest(BaseModel):
    """Either explicit segment ids, or picked pixels resolved to segments."""
    segment_ids: List[str] = Field(default_factory=list)
    points: List[PixelPoint] = Field(default_factory=list)
    iterations: int = _iterations_field()


class SplitSegmentPixelRequest(BaseModel):
    segment_id: str
    a: PixelPoint
    b: PixelPoint


class JoinSegmentsPixelRequest(BaseModel):
    segment_a_id: str
    segment_b_id: str


class RenameSegmentIn(BaseModel):
    segment_id: str
    name: str
