"""
A worm: a head plus a chain of segments dragged behind it at a fixed spacing.
Every segment (head included) is a point force on the sand, so the worm
pulls particles along as it moves.
"""

from typing import Optional

import numpy as np

from world.forces import Force

SEGMENT_STRENGTH = 120.0
SEGMENT_MIN_DISTANCE_SQ = 80.0
SEGMENT_MAX_DISTANCE_SQ = 900.0


class WormSegment:
    __slots__ = ("position",)

    def __init__(self, position) -> None:
        self.position = np.asarray(position, dtype=np.float64)

    def force(self) -> Force:
        x, y = self.position
        return Force(
            position=(float(x), float(y)),
            strength=SEGMENT_STRENGTH,
            min_distance_sq=SEGMENT_MIN_DISTANCE_SQ,
            max_distance_sq=SEGMENT_MAX_DISTANCE_SQ,
        )


def _normalize(v: np.ndarray) -> Optional[np.ndarray]:
    norm = float(np.linalg.norm(v))
    if norm == 0.0:
        return None
    return v / norm


class Worm:
    """Straight-line mover; segments trail the head segment_length apart."""

    def __init__(
        self,
        segment_count: int,
        position,
        direction,
        segment_length: float,
        speed: float,
    ) -> None:
        position = np.asarray(position, dtype=np.float64)
        direction = _normalize(np.asarray(direction, dtype=np.float64))
        if direction is None:
            raise ValueError("worm direction must be non-zero")
        self.head = WormSegment(position)
        self.segments = [
            WormSegment(position - direction * segment_length * (i + 1)) for i in range(segment_count)
        ]
        self.segment_length = segment_length
        self.speed = speed

    def move_to(self, position) -> None:
        """Put the head at position; each segment follows its predecessor at segment_length."""
        self.head.position = np.asarray(position, dtype=np.float64)
        leader = self.head.position
        for segment in self.segments:
            normal = _normalize(segment.position - leader)
            if normal is not None:
                segment.position = leader + normal * self.segment_length
            leader = segment.position

    def direction(self) -> Optional[np.ndarray]:
        """Unit vector from the first segment to the head."""
        if not self.segments:
            return None
        return _normalize(self.head.position - self.segments[0].position)

    def step_ai(self, delta: float) -> None:
        # straight ahead for now
        direction = self.direction()
        if direction is not None:
            self.move_to(self.head.position + direction * self.speed * delta)

    def steer_toward(self, target, delta: float) -> None:
        """Move the head toward target at most speed * delta."""
        offset = np.asarray(target, dtype=np.float64) - self.head.position
        distance = float(np.linalg.norm(offset))
        if distance == 0.0:
            return
        travel = min(distance, self.speed * delta)
        self.move_to(self.head.position + offset / distance * travel)

    def forces(self) -> list[Force]:
        return [self.head.force()] + [segment.force() for segment in self.segments]
