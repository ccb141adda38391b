"""Drop new particles at the top of the world. Same seed gives the same stream of spawn speeds."""

import random
from typing import Optional

from world.cell import Empty, Particle
from world.constants import SPAWN_SPEED_RANGE
from world.grid import Coordinate, Grid


def spawn_point(side: int) -> Coordinate:
    """Top-center cell."""
    return side // 2, side - 1


def spawn_particle(
    grid: Grid,
    coordinate: Optional[Coordinate] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Place a particle falling at a random speed if the cell is free. Returns whether one was placed."""
    if coordinate is None:
        coordinate = spawn_point(grid.side)
    if not isinstance(grid.get(coordinate), Empty):
        return False
    rng = rng if rng is not None else random.Random()
    low, high = SPAWN_SPEED_RANGE
    grid.set(coordinate, Particle((0.0, rng.uniform(low, high))))
    return True
