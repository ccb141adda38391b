"""Simulation constants. y grows upward; gravity pulls toward row 0."""

WORLD_SIZE = 100
GRAVITY = (0.0, -0.3)
# Speed removed per tick; speeds at or below this are left alone.
FRICTION = 0.05
# Speeds above this get a warning in the log (runaway forces).
SPEED_WARNING = 50.0

# RGBA per cell kind, in to_pixels() order.
EMPTY_COLOR = (255, 255, 255, 255)
PARTICLE_COLOR = (0, 0, 0, 0)

# Unit step (dx, dy) -> the two adjacent compass directions tried when that step is blocked.
DIAGONAL_NEIGHBORS = {
    (0, 1): ((1, 1), (-1, 1)),
    (1, 1): ((1, 0), (0, 1)),
    (1, 0): ((1, 1), (1, -1)),
    (1, -1): ((1, 0), (0, -1)),
    (0, -1): ((1, -1), (-1, -1)),
    (-1, -1): ((-1, 0), (0, -1)),
    (-1, 0): ((-1, 1), (-1, -1)),
    (-1, 1): ((-1, 0), (0, 1)),
}

# Vertical speed range for freshly spawned particles.
SPAWN_SPEED_RANGE = (-2.0, 0.0)
