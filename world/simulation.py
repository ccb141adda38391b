"""
Per-tick update: every particle integrates gravity and forces, loses a little
speed to friction, then walks the rasterized line toward its destination one
cell at a time. A blocked cell (occupied or off-grid) ends the walk; the
particle then tries to slip into one of the two cells diagonal to the blocked
step, in coin-flip order, or comes to rest.

The grid is updated in place during a single sweep (sweep_order): rows from
y=0 upward, x ascending within a row. A particle moved into a cell the sweep
has not reached yet is updated again in the same tick.
"""

import logging
import math
import random
from typing import Iterable, Iterator, Optional, Protocol

import numpy as np

from world.cell import Empty, Particle
from world.constants import DIAGONAL_NEIGHBORS, FRICTION, GRAVITY, SPEED_WARNING
from world.forces import Force
from world.grid import Coordinate, Grid
from world.path import iter_line

logger = logging.getLogger(__name__)

_GRAVITY = np.array(GRAVITY, dtype=np.float64)


class CoinSource(Protocol):
    """Anything with random() in [0, 1); random.Random qualifies."""

    def random(self) -> float: ...


def integrate_velocity(
    coordinate: Coordinate,
    velocity: np.ndarray,
    forces: Iterable[Force] = (),
    friction: float = FRICTION,
) -> np.ndarray:
    """Gravity, then every in-band force, then friction. Returns a new array."""
    v = velocity + _GRAVITY
    position = np.array(coordinate, dtype=np.float64)
    for force in forces:
        v += force.acceleration_at(position)
    speed_sq = float(v @ v)
    if speed_sq > friction * friction:
        speed = math.sqrt(speed_sq)
        v -= v / speed * friction
    return v


def _destination(coordinate: Coordinate, velocity: np.ndarray) -> Coordinate:
    """floor(coordinate + velocity), clamped at 0. Zeroes velocity components that get clamped."""
    x = math.floor(coordinate[0] + velocity[0])
    y = math.floor(coordinate[1] + velocity[1])
    if x < 0:
        x = 0
        velocity[0] = 0.0
    if y < 0:
        y = 0
        velocity[1] = 0.0
    return x, y


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _slip(grid: Grid, current: Coordinate, blocked: Coordinate, rng: CoinSource) -> Optional[Coordinate]:
    """Move the particle at current into a free cell diagonal to the blocked step. None if both are taken."""
    step = (_sign(blocked[0] - current[0]), _sign(blocked[1] - current[1]))
    first, second = DIAGONAL_NEIGHBORS[step]
    candidates = (first, second) if rng.random() < 0.5 else (second, first)
    for dx, dy in candidates:
        target = (current[0] + dx, current[1] + dy)
        if isinstance(grid.get(target), Empty):
            grid.swap(current, target)
            return target
    return None


def update_particle(
    grid: Grid,
    coordinate: Coordinate,
    particle: Particle,
    forces: Iterable[Force] = (),
    rng: Optional[CoinSource] = None,
) -> Coordinate:
    """Advance one particle. Returns the coordinate it ends on."""
    rng = rng if rng is not None else random.Random()
    velocity = integrate_velocity(coordinate, np.array(particle.velocity, dtype=np.float64), forces)

    if not np.all(np.isfinite(velocity)):
        logger.warning("Non-finite velocity %s at %s; resetting to zero", velocity, coordinate)
        velocity = np.zeros(2, dtype=np.float64)
    else:
        speed_sq = float(velocity @ velocity)
        if speed_sq > SPEED_WARNING * SPEED_WARNING:
            logger.warning("Runaway speed %.1f at %s", math.sqrt(speed_sq), coordinate)

    destination = _destination(coordinate, velocity)
    grid.set_velocity(coordinate, velocity)
    if destination == coordinate:
        return coordinate

    current = coordinate
    for cell in iter_line(coordinate, destination):
        if isinstance(grid.get(cell), Empty):
            grid.swap(current, cell)
            current = cell
            continue
        slipped = _slip(grid, current, cell, rng)
        if slipped is not None:
            return slipped
        grid.set_velocity(current, (0.0, 0.0))
        return current
    return current


def sweep_order(side: int) -> Iterator[Coordinate]:
    """Visit order for one tick: row y=0 first, x ascending within a row."""
    for y in range(side):
        for x in range(side):
            yield x, y


def step(
    grid: Grid,
    forces: Iterable[Force] = (),
    rng: Optional[CoinSource] = None,
) -> None:
    """One tick over the whole grid. Cells are read at visit time, so moved particles can be visited twice."""
    forces = tuple(forces)
    rng = rng if rng is not None else random.Random()
    for coordinate in sweep_order(grid.side):
        state = grid.get(coordinate)
        if isinstance(state, Particle):
            update_particle(grid, coordinate, state, forces, rng)
