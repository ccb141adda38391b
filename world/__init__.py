"""World: sand grid and the per-tick cellular-automaton step."""

from world.cell import EMPTY, CellKind, CellState, Empty, Particle
from world.constants import FRICTION, GRAVITY, WORLD_SIZE
from world.forces import Force
from world.grid import Grid
from world.path import iter_line, line_path
from world.simulation import step
from world.spawner import spawn_particle, spawn_point
from world.worm import Worm

__all__ = [
    "EMPTY", "CellKind", "CellState", "Empty", "Particle",
    "FRICTION", "GRAVITY", "WORLD_SIZE",
    "Force", "Grid", "iter_line", "line_path", "step",
    "spawn_particle", "spawn_point", "Worm",
]
