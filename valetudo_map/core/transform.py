# valetudo_map/core/transform.py
"""
Pixel <-> physical (millimeter) coordinate transform.

Layer pixels are grid indices; the robot takes commands in millimeters.
physical = (pixel - origin) * pixel_size_mm, and the inverse rounds to the
nearest pixel with ties away from zero.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from .. import config as C
from ..models.map import MapDocument
from ..utils.math import round_half_away

Number = Union[int, float]
Point = Tuple[Number, Number]


class CoordinateTransform:
    __slots__ = ("pixel_size_mm", "origin_x", "origin_y")

    def __init__(self, pixel_size_mm: Number, origin: Point = (0, 0)):
        if pixel_size_mm is None or pixel_size_mm <= 0:
            raise ValueError(f"pixel_size_mm must be positive, got {pixel_size_mm!r}")
        self.pixel_size_mm = pixel_size_mm
        self.origin_x, self.origin_y = origin

    @classmethod
    def for_document(
        cls,
        doc: MapDocument,
        default_pixel_size_mm: Optional[Number] = None,
        origin: Point = (0, 0),
    ) -> "CoordinateTransform":
        """Use the document's pixel size, else the given or configured default."""
        scale = doc.pixel_size_mm
        if scale is None:
            scale = default_pixel_size_mm if default_pixel_size_mm is not None else C.DEFAULT_PIXEL_SIZE_MM
        return cls(scale, origin)

    def __repr__(self) -> str:
        return (f"CoordinateTransform(pixel_size_mm={self.pixel_size_mm!r}, "
                f"origin=({self.origin_x!r}, {self.origin_y!r}))")

    # ---- single points ----
    def to_physical(self, pixel: Point) -> Point:
        x, y = pixel
        s = self.pixel_size_mm
        return ((x - self.origin_x) * s, (y - self.origin_y) * s)

    def to_pixel(self, physical: Point) -> Tuple[int, int]:
        mx, my = physical
        s = self.pixel_size_mm
        return (
            round_half_away(mx / s + self.origin_x),
            round_half_away(my / s + self.origin_y),
        )

    def to_physical_int(self, pixel: Point) -> Tuple[int, int]:
        """to_physical rounded to integral millimeters, as commands require."""
        mx, my = self.to_physical(pixel)
        return (round_half_away(mx), round_half_away(my))

    # ---- flat point lists ([x0, y0, x1, y1, ...]) ----
    def points_to_physical(self, flat: Sequence[Number]) -> List[Number]:
        out: List[Number] = []
        for i in range(0, len(flat) - 1, 2):
            out.extend(self.to_physical((flat[i], flat[i + 1])))
        return out

    def points_to_pixels(self, flat: Sequence[Number]) -> List[int]:
        out: List[int] = []
        for i in range(0, len(flat) - 1, 2):
            out.extend(self.to_pixel((flat[i], flat[i + 1])))
        return out

    # ---- shapes for outgoing commands ----
    def rect_to_physical(self, a: Point, b: Point) -> Tuple[Tuple[int, int], ...]:
        """
        Two opposite pixel corners -> physical (pA, pB, pC, pD), starting at
        the minimum corner and going around: (min,min) (max,min) (max,max) (min,max).
        """
        ax, ay = self.to_physical_int(a)
        bx, by = self.to_physical_int(b)
        min_x, max_x = min(ax, bx), max(ax, bx)
        min_y, max_y = min(ay, by), max(ay, by)
        return ((min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y))

    def line_to_physical(self, a: Point, b: Point) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.to_physical_int(a), self.to_physical_int(b))
