# valetudo_map/core/pixels.py
"""
Run-length pixel decoding for map layers.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple


def decode_pixel_runs(stream: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Expand [x, y, count, x, y, count, ...] into explicit (x, y) pixels.

    Each triple is a horizontal run: (x, y), (x+1, y), ..., (x+count-1, y).
    A count <= 0 emits nothing. A trailing partial triple is dropped: it is
    too short to describe a run, so truncated feeds decode to their valid
    prefix.
    """
    out: List[Tuple[int, int]] = []
    usable = len(stream) - len(stream) % 3
    for i in range(0, usable, 3):
        x = int(stream[i])
        y = int(stream[i + 1])
        count = int(stream[i + 2])
        for dx in range(max(count, 0)):
            out.append((x + dx, y))
    return out


def pair_pixels(flat: Sequence[int]) -> List[Tuple[int, int]]:
    """Group an already-expanded [x0, y0, x1, y1, ...] list into pairs."""
    usable = len(flat) - len(flat) % 2
    return [(int(flat[i]), int(flat[i + 1])) for i in range(0, usable, 2)]
