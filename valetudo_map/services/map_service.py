# valetudo_map/services/map_service.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import numpy as np

from ..core import SharedState, build_map_document, content_bounds, segment_at, segment_infos
from ..models import (
    BoundsModel, EntityKind, EntitySummary, LayerKind, LayerSummary, MapDocument,
    MapDocumentResponse, MapGridResponse, PixelPoint, RestrictedZone, SegmentAtResponse,
    SegmentInfoModel, SegmentListResponse, SizeModel, UnknownKind, VirtualRestrictionsRequest,
    VirtualWall, WallPoints, ZonePoint, ZonePoints,
)
from .. import config as C


def _bounds_to_model(box) -> Optional[BoundsModel]:
    if box is None:
        return None
    return BoundsModel(
        min_x=box.min_x, max_x=box.max_x, mid_x=box.mid_x,
        min_y=box.min_y, max_y=box.max_y, mid_y=box.mid_y,
    )


def document_to_model(doc: MapDocument, version: int) -> MapDocumentResponse:
    """Convert a MapDocument to its API summary (pixels left out)."""
    layers = [
        LayerSummary(
            kind=l.kind.value,
            known=not isinstance(l.kind, UnknownKind),
            segment_id=l.segment_id,
            name=l.metadata.name,
            active=l.metadata.active,
            pixel_count=len(l.pixels),
            bounds=_bounds_to_model(l.bounding_box()),
        )
        for l in doc.layers
    ]
    entities = [
        EntitySummary(
            kind=e.kind.value,
            known=not isinstance(e.kind, UnknownKind),
            points=list(e.points),
            angle=e.angle,
        )
        for e in doc.entities
    ]
    size = SizeModel(width=doc.size.width, height=doc.size.height) if doc.size else None
    return MapDocumentResponse(
        version=version,
        size=size,
        pixel_size_mm=doc.pixel_size_mm,
        layers=layers,
        entities=entities,
    )


def decode_service(shared: SharedState, raw) -> MapDocumentResponse:
    """
    Decode a telemetry snapshot and publish it as the current document.
    MapDecodeError propagates to the caller; the previous document is kept.
    """
    doc = build_map_document(raw)
    version = shared.publish(doc)
    return document_to_model(doc, version)


def segments_service(doc: MapDocument) -> SegmentListResponse:
    return SegmentListResponse(segments=[
        SegmentInfoModel(
            segment_id=s.segment_id,
            name=s.name,
            active=s.active,
            label=PixelPoint(x=s.label_x, y=s.label_y),
            pixel_count=s.pixel_count,
        )
        for s in segment_infos(doc)
    ])


def segment_at_service(doc: MapDocument, x: int, y: int) -> SegmentAtResponse:
    return SegmentAtResponse(x=x, y=y, segment_id=segment_at(doc, (x, y)))


def _grid_frame(doc: MapDocument) -> Optional[Tuple[int, int, int, int]]:
    """(origin_x, origin_y, width, height) of the raster."""
    if doc.size is not None and doc.size.width > 0 and doc.size.height > 0:
        return 0, 0, doc.size.width, doc.size.height
    box = content_bounds(doc)
    if box is None:
        return None
    return box.min_x, box.min_y, box.max_x - box.min_x + 1, box.max_y - box.min_y + 1


def map_grid(doc: MapDocument) -> Tuple[Optional[np.ndarray], Dict[str, int], Tuple[int, int]]:
    """
    Rasterise layers into a label grid [H, W].
    Later layers paint over earlier ones (source order is z-order); unknown
    layer kinds are skipped and pixels outside the frame are dropped.
    """
    frame = _grid_frame(doc)
    labels: Dict[str, int] = {"floor": C.GRID_FLOOR, "wall": C.GRID_WALL}
    if frame is None:
        return None, labels, (0, 0)
    ox, oy, W, H = frame
    grid = np.full((H, W), C.GRID_EMPTY, dtype=C.GRID_DTYPE)

    next_segment = C.GRID_SEGMENT_BASE
    for layer in doc.layers:
        if layer.kind is LayerKind.FLOOR:
            value = C.GRID_FLOOR
        elif layer.kind is LayerKind.WALL:
            value = C.GRID_WALL
        elif layer.kind is LayerKind.SEGMENT:
            value = next_segment
            next_segment += 1
            if layer.segment_id is not None:
                labels.setdefault(layer.segment_id, value)
        else:
            continue
        if not layer.pixels:
            continue
        pts = np.asarray(layer.pixels, dtype=np.int64).reshape(-1, 2)
        xs = pts[:, 0] - ox
        ys = pts[:, 1] - oy
        keep = (xs >= 0) & (xs < W) & (ys >= 0) & (ys < H)
        grid[ys[keep], xs[keep]] = value

    return grid, labels, (ox, oy)


def map_grid_service(doc: MapDocument) -> MapGridResponse:
    grid, labels, (ox, oy) = map_grid(doc)
    if grid is None:
        return MapGridResponse(width=0, height=0, origin_x=0, origin_y=0, labels=labels, data=[])
    H, W = grid.shape
    return MapGridResponse(
        width=int(W),
        height=int(H),
        origin_x=int(ox),
        origin_y=int(oy),
        labels=labels,
        data=grid.flatten(order="C").astype(int).tolist(),
    )


def _zone_points(pairs) -> ZonePoints:
    a, b, c, d = [ZonePoint(x=int(p[0]), y=int(p[1])) for p in pairs[:4]]
    return ZonePoints(pA=a, pB=b, pC=c, pD=d)


def restrictions_service(doc: MapDocument) -> VirtualRestrictionsRequest:
    """
    Current virtual walls and no-go/no-mop areas, in the shape the robot
    accepts back, so a client can edit and resubmit the full set.
    Entity points are passed through unchanged.
    """
    walls: List[VirtualWall] = []
    for e in doc.entities_of(EntityKind.VIRTUAL_WALL):
        (ax, ay), (bx, by) = e.point_pairs()[:2]
        walls.append(VirtualWall(points=WallPoints(
            pA=ZonePoint(x=int(ax), y=int(ay)),
            pB=ZonePoint(x=int(bx), y=int(by)),
        )))
    no_go = [RestrictedZone(points=_zone_points(e.point_pairs()))
             for e in doc.entities_of(EntityKind.NO_GO_AREA)]
    no_mop = [RestrictedZone(points=_zone_points(e.point_pairs()))
              for e in doc.entities_of(EntityKind.NO_MOP_AREA)]
    return VirtualRestrictionsRequest(virtualWalls=walls, restrictedZones=no_go, noMopZones=no_mop)
