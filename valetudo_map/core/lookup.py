# valetudo_map/core/lookup.py
"""
Room/segment lookups over a decoded MapDocument.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .. import config as C
from ..models.map import BoundingBox, Layer, MapDocument, Pixel


@dataclass(frozen=True)
class SegmentInfo:
    segment_id: str
    name: str
    active: bool
    label_x: int
    label_y: int
    pixel_count: int


def layer_at(doc: MapDocument, point: Pixel, use_dimensions: bool = True) -> Optional[Layer]:
    """
    First segment layer (in layer order) whose pixels contain `point`.

    Reported dimensions are only a reject test; the answer is the same with
    use_dimensions=False. Overlapping segments are tolerated: first match wins.
    """
    p = (int(point[0]), int(point[1]))
    for layer in doc.segments:
        if use_dimensions and layer.dimensions is not None and not layer.dimensions.contains(p):
            continue
        if layer.contains(p):
            return layer
    return None


def segment_at(doc: MapDocument, point: Pixel, use_dimensions: bool = True) -> Optional[str]:
    layer = layer_at(doc, point, use_dimensions=use_dimensions)
    return layer.segment_id if layer is not None else None


def _label_point(layer: Layer) -> Optional[Tuple[int, int]]:
    if layer.dimensions is not None:
        return (layer.dimensions.mid_x, layer.dimensions.mid_y)
    if not layer.pixels:
        return None
    n = len(layer.pixels)
    sx = sum(p[0] for p in layer.pixels)
    sy = sum(p[1] for p in layer.pixels)
    return (sx // n, sy // n)


def segment_infos(doc: MapDocument) -> List[SegmentInfo]:
    """Addressable segments with a display name and a label point."""
    infos: List[SegmentInfo] = []
    for layer in doc.segments:
        sid = layer.segment_id
        if sid is None:
            continue
        label = _label_point(layer)
        if label is None:
            continue
        infos.append(SegmentInfo(
            segment_id=sid,
            name=layer.metadata.name or f"{C.UNNAMED_SEGMENT_PREFIX} {sid}",
            active=bool(layer.metadata.active),
            label_x=label[0],
            label_y=label[1],
            pixel_count=len(layer.pixels),
        ))
    return infos


def content_bounds(doc: MapDocument) -> Optional[BoundingBox]:
    """Bounding box over every layer's pixels; None for an empty map."""
    boxes = [b for b in (l.bounding_box() for l in doc.layers) if b is not None]
    if not boxes:
        return None
    min_x = min(b.min_x for b in boxes)
    max_x = max(b.max_x for b in boxes)
    min_y = min(b.min_y for b in boxes)
    max_y = max(b.max_y for b in boxes)
    return BoundingBox(
        min_x=min_x, max_x=max_x, mid_x=(min_x + max_x) // 2,
        min_y=min_y, max_y=max_y, mid_y=(min_y + max_y) // 2,
    )
