# valetudo_map/models/commands.py
"""
Pydantic models for outgoing robot capability payloads.

Coordinates here are physical (millimeters). These models only describe the
request bodies; sending them is the network client's job.
"""
from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field


class ZonePoint(BaseModel):
    x: int
    y: int


class ZonePoints(BaseModel):
    """Four corners, (min,min) (max,min) (max,max) (min,max)."""
    pA: ZonePoint
    pB: ZonePoint
    pC: ZonePoint
    pD: ZonePoint


class WallPoints(BaseModel):
    pA: ZonePoint
    pB: ZonePoint


class GoToRequest(BaseModel):
    """GoToLocationCapability."""
    action: str = "goto"
    coordinates: ZonePoint


class CleaningZone(BaseModel):
    points: ZonePoints
    iterations: int = 1


class ZoneCleanRequest(BaseModel):
    """ZoneCleaningCapability."""
    action: str = "clean"
    zones: List[CleaningZone]


class SegmentCleanRequest(BaseModel):
    """MapSegmentationCapability."""
    action: str = "start_segment_action"
    segment_ids: List[str]
    iterations: int = 1


class VirtualWall(BaseModel):
    points: WallPoints


class RestrictedZone(BaseModel):
    points: ZonePoints


class VirtualRestrictionsRequest(BaseModel):
    """CombinedVirtualRestrictionsCapability."""
    virtualWalls: List[VirtualWall] = Field(default_factory=list)
    restrictedZones: List[RestrictedZone] = Field(default_factory=list)
    noMopZones: List[RestrictedZone] = Field(default_factory=list)


class SplitSegmentRequest(BaseModel):
    """MapSegmentEditCapability: cut one segment along a line."""
    action: str = "split_segment"
    segment_id: str
    pA: ZonePoint
    pB: ZonePoint


class JoinSegmentsRequest(BaseModel):
    """MapSegmentEditCapability: merge two adjacent segments."""
    action: str = "join_segments"
    segment_a_id: str
    segment_b_id: str


class SegmentRenameRequest(BaseModel):
    """MapSegmentRenameCapability."""
    action: str = "rename_segment"
    segment_id: str
    name: str
