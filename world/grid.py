"""SIDE x SIDE cell grid. Row-major storage indexed [y, x]; coordinates are (x, y)."""

from typing import Iterator, Optional

import numpy as np

from world.cell import EMPTY, CellKind, CellState, Particle
from world.constants import EMPTY_COLOR, PARTICLE_COLOR, WORLD_SIZE

Coordinate = tuple[int, int]

# Indexed by CellKind.
PALETTE = np.array([EMPTY_COLOR, PARTICLE_COLOR], dtype=np.uint8)


class Grid:
    """Kind tags plus per-cell velocity; Empty cells always hold zero velocity."""

    __slots__ = ("side", "kinds", "velocities")

    def __init__(self, side: int = WORLD_SIZE) -> None:
        self.side = side
        self.kinds = np.full((side, side), CellKind.EMPTY, dtype=np.uint8)
        self.velocities = np.zeros((side, side, 2), dtype=np.float64)

    def in_bounds(self, coordinate: Coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.side and 0 <= y < self.side

    def get(self, coordinate: Coordinate) -> Optional[CellState]:
        """Cell state at coordinate, or None outside the grid."""
        if not self.in_bounds(coordinate):
            return None
        x, y = coordinate
        if self.kinds[y, x] == CellKind.EMPTY:
            return EMPTY
        vx, vy = self.velocities[y, x]
        return Particle((float(vx), float(vy)))

    def set(self, coordinate: Coordinate, state: CellState) -> None:
        """Overwrite a cell. Raises IndexError outside the grid (numpy would wrap negatives)."""
        if not self.in_bounds(coordinate):
            raise IndexError(f"cell {coordinate} outside {self.side}x{self.side} grid")
        x, y = coordinate
        self.kinds[y, x] = state.kind
        if isinstance(state, Particle):
            self.velocities[y, x] = state.velocity
        else:
            self.velocities[y, x] = 0.0

    def set_velocity(self, coordinate: Coordinate, velocity) -> None:
        """Store velocity on an occupied cell without rebuilding a Particle."""
        x, y = coordinate
        self.velocities[y, x] = velocity

    def swap(self, a: Coordinate, b: Coordinate) -> None:
        """Exchange two cells. Does nothing if either is outside the grid."""
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return
        (ax, ay), (bx, by) = a, b
        self.kinds[ay, ax], self.kinds[by, bx] = self.kinds[by, bx], self.kinds[ay, ax]
        va = self.velocities[ay, ax].copy()
        self.velocities[ay, ax] = self.velocities[by, bx]
        self.velocities[by, bx] = va

    def clear(self) -> None:
        self.kinds.fill(CellKind.EMPTY)
        self.velocities.fill(0.0)

    def count_particles(self) -> int:
        return int(np.count_nonzero(self.kinds == CellKind.PARTICLE))

    def particle_coordinates(self) -> Iterator[Coordinate]:
        """Occupied cells in sweep order (row y=0 first, x ascending)."""
        ys, xs = np.nonzero(self.kinds == CellKind.PARTICLE)
        for y, x in zip(ys, xs):
            yield int(x), int(y)

    def to_pixels(self) -> bytes:
        """RGBA, 4 bytes per cell, row y=0 first, no padding. Color depends only on the kind."""
        return PALETTE[self.kinds].tobytes()
