import random

from world import EMPTY, Grid, Particle, spawn_particle, spawn_point, step
from world.constants import SPAWN_SPEED_RANGE


def test_spawn_point_is_top_center():
    assert spawn_point(100) == (50, 99)
    assert spawn_point(7) == (3, 6)


def test_spawn_on_free_cell(grid):
    assert spawn_particle(grid, rng=random.Random(1))
    state = grid.get((50, 99))
    assert isinstance(state, Particle)
    vx, vy = state.velocity
    low, high = SPAWN_SPEED_RANGE
    assert vx == 0.0
    assert low <= vy <= high


def test_spawn_skips_occupied_cell(grid):
    grid.set((50, 99), Particle((1.0, 1.0)))
    assert not spawn_particle(grid, rng=random.Random(1))
    assert grid.get((50, 99)) == Particle((1.0, 1.0))
    assert grid.count_particles() == 1


def test_spawn_at_explicit_coordinate(grid):
    assert spawn_particle(grid, (3, 4), rng=random.Random(2))
    assert isinstance(grid.get((3, 4)), Particle)
    assert grid.get((50, 99)) == EMPTY


def test_spawn_outside_grid_is_refused(grid):
    assert not spawn_particle(grid, (100, 100), rng=random.Random(2))
    assert grid.count_particles() == 0


def test_seeded_spawns_repeat():
    a, b = Grid(10), Grid(10)
    spawn_particle(a, rng=random.Random(42))
    spawn_particle(b, rng=random.Random(42))
    assert a.get((5, 9)) == b.get((5, 9))


def test_spawn_and_step_accumulate_grains():
    g = Grid(20)
    rng = random.Random(0)
    for _ in range(30):
        spawn_particle(g, rng=rng)
        step(g, rng=rng)
    assert 1 <= g.count_particles() <= 30
    # everything that landed is on or near the floor
    assert any(y == 0 for _, y in g.particle_coordinates())
