"""Cell states: a cell is either Empty or holds a Particle with a 2D velocity."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class CellKind(IntEnum):
    """Tag stored in the grid's kind array; also the palette index."""

    EMPTY = 0
    PARTICLE = 1


@dataclass(frozen=True)
class Empty:
    kind = CellKind.EMPTY


@dataclass(frozen=True)
class Particle:
    velocity: tuple[float, float] = (0.0, 0.0)
    kind = CellKind.PARTICLE


EMPTY = Empty()

CellState = Union[Empty, Particle]
