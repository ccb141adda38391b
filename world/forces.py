"""Point attractors/repulsors supplied by the driver each tick."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Force:
    """
    Inverse-distance point force. Positive strength pulls particles toward
    position, negative pushes them away. Applies only while
    min_distance_sq <= distance_sq < max_distance_sq.
    """

    position: tuple[float, float]
    strength: float
    min_distance_sq: float
    max_distance_sq: float

    def acceleration_at(self, position: np.ndarray) -> np.ndarray:
        """Velocity change for a particle at position; zero outside the band."""
        offset = np.asarray(self.position, dtype=np.float64) - position
        distance_sq = float(offset @ offset)
        if distance_sq == 0.0 or not (self.min_distance_sq <= distance_sq < self.max_distance_sq):
            return np.zeros(2, dtype=np.float64)
        return offset / np.sqrt(distance_sq) * (self.strength / distance_sq)
