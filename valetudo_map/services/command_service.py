# valetudo_map/services/command_service.py
"""
Build robot command payloads from picks made on the map in pixel space.

Nothing here talks to the robot; the returned models are handed to the
network client as request bodies.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from ..core import CoordinateTransform, segment_at
from ..models import (
    CleaningZone, GoToRequest, JoinSegmentsRequest, MapDocument, PixelPoint, SegmentCleanRequest,
    SegmentRenameRequest, SplitSegmentRequest, ZoneCleanRequest, ZonePoint, ZonePoints,
)
from ..utils.math import clip
from .. import config as C


class CommandBuildError(ValueError):
    """A command cannot be built from the given picks and document."""


def _iterations(n: int) -> int:
    return int(clip(int(n), C.MIN_ITERATIONS, C.MAX_ITERATIONS))


def _zp(p) -> ZonePoint:
    return ZonePoint(x=int(p[0]), y=int(p[1]))


def _addressable_ids(doc: MapDocument) -> List[str]:
    return [l.segment_id for l in doc.segments if l.segment_id is not None]


def go_to_command(transform: CoordinateTransform, pixel: PixelPoint) -> GoToRequest:
    return GoToRequest(coordinates=_zp(transform.to_physical_int((pixel.x, pixel.y))))


def zone_clean_command(
    transform: CoordinateTransform,
    rects: Iterable[Sequence[PixelPoint]],
    iterations: Optional[Sequence[int]] = None,
) -> ZoneCleanRequest:
    """Each rect is two opposite pixel corners; corners are normalised to min/max."""
    rects = list(rects)
    if iterations is not None and len(iterations) != len(rects):
        raise CommandBuildError(
            f"got {len(iterations)} iteration counts for {len(rects)} zones"
        )
    zones: List[CleaningZone] = []
    for i, (a, b) in enumerate(rects):
        pA, pB, pC, pD = transform.rect_to_physical((a.x, a.y), (b.x, b.y))
        n = iterations[i] if iterations is not None else C.DEFAULT_ITERATIONS
        zones.append(CleaningZone(
            points=ZonePoints(pA=_zp(pA), pB=_zp(pB), pC=_zp(pC), pD=_zp(pD)),
            iterations=_iterations(n),
        ))
    if not zones:
        raise CommandBuildError("zone cleaning needs at least one zone")
    return ZoneCleanRequest(zones=zones)


def segment_clean_command(
    doc: MapDocument,
    segment_ids: Sequence[str] = (),
    points: Sequence[PixelPoint] = (),
    iterations: int = C.DEFAULT_ITERATIONS,
) -> SegmentCleanRequest:
    """
    Rooms to clean, given by id and/or by picked pixels. Picks outside every
    segment, and segments without an id, cannot be cleaned by room.
    """
    known = set(_addressable_ids(doc))
    ids: List[str] = []
    for sid in segment_ids:
        if sid not in known:
            raise CommandBuildError(f"unknown segment id {sid!r}")
        if sid not in ids:
            ids.append(sid)
    for p in points:
        sid = segment_at(doc, (p.x, p.y))
        if sid is None:
            raise CommandBuildError(f"no addressable segment at ({p.x}, {p.y})")
        if sid not in ids:
            ids.append(sid)
    if not ids:
        raise CommandBuildError("segment cleaning needs at least one segment")
    return SegmentCleanRequest(segment_ids=ids, iterations=_iterations(iterations))


def split_segment_command(
    doc: MapDocument, transform: CoordinateTransform, segment_id: str, a: PixelPoint, b: PixelPoint,
) -> SplitSegmentRequest:
    if segment_id not in _addressable_ids(doc):
        raise CommandBuildError(f"unknown segment id {segment_id!r}")
    pA, pB = transform.line_to_physical((a.x, a.y), (b.x, b.y))
    return SplitSegmentRequest(segment_id=segment_id, pA=_zp(pA), pB=_zp(pB))


def join_segments_command(doc: MapDocument, segment_a_id: str, segment_b_id: str) -> JoinSegmentsRequest:
    known = _addressable_ids(doc)
    for sid in (segment_a_id, segment_b_id):
        if sid not in known:
            raise CommandBuildError(f"unknown segment id {sid!r}")
    if segment_a_id == segment_b_id:
        raise CommandBuildError("cannot join a segment with itself")
    return JoinSegmentsRequest(segment_a_id=segment_a_id, segment_b_id=segment_b_id)


def rename_segment_command(doc: MapDocument, segment_id: str, name: str) -> SegmentRenameRequest:
    if segment_id not in _addressable_ids(doc):
        raise CommandBuildError(f"unknown segment id {segment_id!r}")
    name = name.strip()
    if not name:
        raise CommandBuildError("segment name must not be empty")
    return SegmentRenameRequest(segment_id=segment_id, name=name)
