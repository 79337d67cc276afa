# valetudo_map/core/builder.py
"""
Validate raw map telemetry and assemble an immutable MapDocument.

No I/O, no logging and nothing retained between calls; every call returns
fresh tuples, so the caller may reuse or mutate its input afterwards.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from ..models.map import (
    BoundingBox,
    Entity,
    EntityKind,
    Layer,
    LayerMetadata,
    MapDocument,
    MapSize,
    UnknownKind,
    resolve_entity_kind,
    resolve_layer_kind,
)
from ..models.raw import RawDimensions, RawEntity, RawLayer, RawMapTelemetry
from ..utils.math import round_half_away
from .errors import InvalidDimensionsError, MalformedGeometryError, MalformedTelemetryError
from .pixels import decode_pixel_runs, pair_pixels

# kind -> (min values, max values or None)
# Odd counts above the minimum are accepted; Entity.point_pairs drops the tail.
_ARITY: Dict[EntityKind, Tuple[int, Optional[int]]] = {
    EntityKind.ROBOT_POSITION:   (2, 3),
    EntityKind.CHARGER_LOCATION: (2, 2),
    EntityKind.GO_TO_TARGET:     (2, 2),
    EntityKind.VIRTUAL_WALL:     (4, 4),
    EntityKind.PATH:             (0, None),
    EntityKind.PREDICTED_PATH:   (0, None),
    EntityKind.NO_GO_AREA:       (8, None),
    EntityKind.NO_MOP_AREA:      (8, None),
    EntityKind.ACTIVE_ZONE:      (8, None),
}


def _expected(lo: int, hi: Optional[int]) -> str:
    if hi is None:
        return f"at least {lo}"
    if lo == hi:
        return f"exactly {lo}"
    return f"{lo} to {hi}"


def _check_arity(kind, points: Tuple, index: int) -> None:
    rule = _ARITY.get(kind)
    if rule is None:
        # unknown kinds pass through unvalidated
        return
    lo, hi = rule
    n = len(points)
    if n < lo or (hi is not None and n > hi):
        raise MalformedGeometryError(kind.value, n, _expected(lo, hi), index=index)


def _tag(item: Dict[str, Any], where: str) -> Optional[str]:
    tag = item.get("type")
    if tag is not None and not isinstance(tag, str):
        raise MalformedTelemetryError(f"{where}.type: expected a string, got {tag!r}")
    return tag


def _validate(model, item: Dict[str, Any], where: str):
    try:
        return model.model_validate(item)
    except ValidationError as exc:
        raise MalformedTelemetryError(f"{where}: {exc}") from exc


def _lenient_points(value) -> Tuple[Union[int, float], ...]:
    if not isinstance(value, list):
        return ()
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
        return ()
    return tuple(value)


def _lenient_class(item: Dict[str, Any]) -> Optional[str]:
    value = item.get("__class")
    return value if isinstance(value, str) else None


def _size(raw: RawMapTelemetry) -> Optional[MapSize]:
    if raw.size is None:
        return None
    x, y = raw.size.x, raw.size.y
    if (x is not None and x < 0) or (y is not None and y < 0):
        raise InvalidDimensionsError(f"map size must be non-negative, got x={x}, y={y}")
    if x is None or y is None:
        return None
    return MapSize(width=x, height=y)


def _pixel_size(raw: RawMapTelemetry):
    ps = raw.pixel_size
    if ps is not None and ps <= 0:
        raise InvalidDimensionsError(f"pixelSize must be positive, got {ps}")
    return ps


def _dimensions(raw: Optional[RawDimensions]) -> Optional[BoundingBox]:
    if raw is None or raw.x is None or raw.y is None:
        return None
    rx, ry = raw.x, raw.y
    if None in (rx.min, rx.max, ry.min, ry.max):
        return None
    return BoundingBox(
        min_x=rx.min, max_x=rx.max,
        mid_x=rx.mid if rx.mid is not None else (rx.min + rx.max) // 2,
        min_y=ry.min, max_y=ry.max,
        mid_y=ry.mid if ry.mid is not None else (ry.min + ry.max) // 2,
    )



def _layer(raw: RawLayer) -> Layer:
    if raw.pixels:
        pixels = pair_pixels(raw.pixels)
    elif raw.compressed_pixels:
        pixels = decode_pixel_runs(raw.compressed_pixels)
    else:
        pixels = []

    md = raw.meta_data
    metadata = LayerMetadata()
    if md is not None:
        metadata = LayerMetadata(
            segment_id=md.segment_id,
            name=md.name,
            active=md.active,
            area=md.area,
        )

    return Layer(
        kind=resolve_layer_kind(raw.type),
        pixels=tuple(pixels),
        metadata=metadata,
        dimensions=_dimensions(raw.dimensions),
    )


def _layer_item(item: Dict[str, Any], index: int) -> Layer:
    """
    The tag is read before the body is validated. A body that does not fit
    RawLayer fails the document only for known kinds; an unknown kind keeps
    its tag and nothing else.
    """
    where = f"layers.{index}"
    kind = resolve_layer_kind(_tag(item, where))
    if not isinstance(kind, UnknownKind):
        return _layer(_validate(RawLayer, item, where))
    try:
        raw = RawLayer.model_validate(item)
    except ValidationError:
        return Layer(kind=kind)
    return _layer(raw)


def _entity(raw: RawEntity, index: int) -> Entity:
    kind = resolve_entity_kind(raw.type)
    points = tuple(raw.points or ())
    _check_arity(kind, points, index)

    angle = raw.meta_data.angle if raw.meta_data is not None else None
    if angle is None and kind is EntityKind.ROBOT_POSITION and len(points) == 3:
        angle = points[2]
    if angle is not None:
        angle = round_half_away(angle)

    return Entity(kind=kind, points=points, angle=angle, entity_class=raw.entity_class)


def _entity_item(item: Dict[str, Any], index: int) -> Entity:
    where = f"entities.{index}"
    kind = resolve_entity_kind(_tag(item, where))
    if not isinstance(kind, UnknownKind):
        return _entity(_validate(RawEntity, item, where), index)
    try:
        raw = RawEntity.model_validate(item)
    except ValidationError:
        return Entity(
            kind=kind,
            points=_lenient_points(item.get("points")),
            entity_class=_lenient_class(item),
        )
    return _entity(raw, index)


def build_map_document(raw: Union[RawMapTelemetry, Dict[str, Any]]) -> MapDocument:
    """
    Decode one telemetry snapshot.

    Raises:
    - MalformedTelemetryError: input does not fit the map schema
    - InvalidDimensionsError: negative size or non-positive pixelSize
    - MalformedGeometryError: an entity has the wrong number of point values

    Layers and entities of unknown kinds never raise; their bodies are kept
    as far as they parse.
    """
    if not isinstance(raw, RawMapTelemetry):
        try:
            raw = RawMapTelemetry.model_validate(raw)
        except ValidationError as exc:
            raise MalformedTelemetryError(str(exc)) from exc

    size = _size(raw)
    pixel_size = _pixel_size(raw)
    layers = tuple(_layer_item(l, i) for i, l in enumerate(raw.layers or ()))
    entities = tuple(_entity_item(e, i) for i, e in enumerate(raw.entities or ()))

    return MapDocument(
        size=size,
        pixel_size_mm=pixel_size,
        layers=layers,
        entities=entities,
    )
