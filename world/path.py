"""
Integer line rasterization between two cells. The axis with the larger delta
drives (steps by one each iteration); the other axis is interpolated as
round(slope * i). Start is excluded, end is included.
"""

import math
from typing import Iterator

Coordinate = tuple[int, int]


def _round_half_away(value: float) -> int:
    # Python's round() is half-to-even; 0.5 must go to 1 and -0.5 to -1.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def iter_line(start: Coordinate, end: Coordinate) -> Iterator[Coordinate]:
    """Yield cells from start (exclusive) to end (inclusive), lazily."""
    x0, y0 = start
    dx, dy = end[0] - x0, end[1] - y0
    if abs(dx) >= abs(dy):
        major, minor = dx, dy
    else:
        major, minor = dy, dx
    if major == 0:
        return
    step = _sign(major)
    slope = minor / abs(major)
    for i in range(1, abs(major) + 1):
        offset = _round_half_away(slope * i)
        if abs(dx) >= abs(dy):
            yield x0 + step * i, y0 + offset
        else:
            yield x0 + offset, y0 + step * i


def line_path(start: Coordinate, end: Coordinate) -> list[Coordinate]:
    return list(iter_line(start, end))
