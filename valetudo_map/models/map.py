# valetudo_map/models/map.py
"""
Decoded map model: one immutable MapDocument per telemetry snapshot.

Layer and entity kinds are a closed Enum plus an UnknownKind arm that keeps
the raw tag, so a tag added by a newer firmware decodes instead of failing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import FrozenSet, Iterator, Optional, Tuple, Union

import numpy as np

Pixel = Tuple[int, int]


class LayerKind(str, Enum):
    FLOOR = "floor"
    WALL = "wall"
    SEGMENT = "segment"


class EntityKind(str, Enum):
    ROBOT_POSITION = "robot_position"
    CHARGER_LOCATION = "charger_location"
    PATH = "path"
    PREDICTED_PATH = "predicted_path"
    VIRTUAL_WALL = "virtual_wall"
    NO_GO_AREA = "no_go_area"
    NO_MOP_AREA = "no_mop_area"
    GO_TO_TARGET = "go_to_target"
    ACTIVE_ZONE = "active_zone"


@dataclass(frozen=True)
class UnknownKind:
    """A discriminator tag this version does not know about."""
    tag: str

    @property
    def value(self) -> str:
        return self.tag


AnyLayerKind = Union[LayerKind, UnknownKind]
AnyEntityKind = Union[EntityKind, UnknownKind]


def resolve_layer_kind(tag: Optional[str]) -> AnyLayerKind:
    try:
        return LayerKind(tag)
    except ValueError:
        return UnknownKind(tag or "")


def resolve_entity_kind(tag: Optional[str]) -> AnyEntityKind:
    try:
        return EntityKind(tag)
    except ValueError:
        return UnknownKind(tag or "")


@dataclass(frozen=True)
class MapSize:
    width: int
    height: int


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive pixel bounding box."""
    min_x: int
    max_x: int
    mid_x: int
    min_y: int
    max_y: int
    mid_y: int

    def contains(self, point: Pixel) -> bool:
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    @classmethod
    def from_pixels(cls, pixels) -> Optional["BoundingBox"]:
        if len(pixels) == 0:
            return None
        arr = np.asarray(pixels, dtype=np.int64).reshape(-1, 2)
        min_x, min_y = (int(v) for v in arr.min(axis=0))
        max_x, max_y = (int(v) for v in arr.max(axis=0))
        return cls(
            min_x=min_x, max_x=max_x, mid_x=(min_x + max_x) // 2,
            min_y=min_y, max_y=max_y, mid_y=(min_y + max_y) // 2,
        )


@dataclass(frozen=True)
class LayerMetadata:
    segment_id: Optional[str] = None
    name: Optional[str] = None
    active: Optional[bool] = None
    area: Optional[float] = None


@dataclass(frozen=True)
class Layer:
    kind: AnyLayerKind
    pixels: Tuple[Pixel, ...] = ()
    metadata: LayerMetadata = field(default_factory=LayerMetadata)
    dimensions: Optional[BoundingBox] = None

    @property
    def segment_id(self) -> Optional[str]:
        if self.kind is LayerKind.SEGMENT:
            return self.metadata.segment_id
        return None

    @cached_property
    def pixel_set(self) -> FrozenSet[Pixel]:
        return frozenset(self.pixels)

    def contains(self, point: Pixel) -> bool:
        return tuple(point) in self.pixel_set

    def bounding_box(self) -> Optional[BoundingBox]:
        """Reported dimensions if present, otherwise computed from pixels."""
        if self.dimensions is not None:
            return self.dimensions
        return BoundingBox.from_pixels(self.pixels)


@dataclass(frozen=True)
class Entity:
    """
    A point-based map feature. `points` is the flat [x0, y0, x1, y1, ...]
    list exactly as received; its meaning depends on `kind`:
    - robot_position / charger_location / go_to_target: one point
    - path / predicted_path: polyline vertices
    - virtual_wall: two points; no_go_area / no_mop_area / active_zone: four
    """
    kind: AnyEntityKind
    points: Tuple[Union[int, float], ...] = ()
    angle: Optional[int] = None
    entity_class: Optional[str] = None

    def point_pairs(self) -> Tuple[Tuple[Union[int, float], Union[int, float]], ...]:
        pts = self.points
        return tuple((pts[i], pts[i + 1]) for i in range(0, len(pts) - 1, 2))

    @property
    def position(self):
        if len(self.points) < 2:
            return None
        return (self.points[0], self.points[1])


@dataclass(frozen=True)
class MapDocument:
    size: Optional[MapSize] = None
    pixel_size_mm: Optional[Union[int, float]] = None
    layers: Tuple[Layer, ...] = ()
    entities: Tuple[Entity, ...] = ()

    def layers_of(self, kind: AnyLayerKind) -> Iterator[Layer]:
        return (l for l in self.layers if l.kind == kind)

    def entities_of(self, kind: AnyEntityKind) -> Iterator[Entity]:
        return (e for e in self.entities if e.kind == kind)

    @property
    def segments(self) -> Tuple[Layer, ...]:
        return tuple(self.layers_of(LayerKind.SEGMENT))

    def _first(self, kind: EntityKind) -> Optional[Entity]:
        return next(self.entities_of(kind), None)

    @property
    def robot_position(self) -> Optional[Entity]:
        return self._first(EntityKind.ROBOT_POSITION)

    @property
    def charger_location(self) -> Optional[Entity]:
        return self._first(EntityKind.CHARGER_LOCATION)
