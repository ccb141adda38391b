import numpy as np
import pytest

from world import EMPTY, Grid, Particle
from world.constants import EMPTY_COLOR, PARTICLE_COLOR


def test_new_grid_is_empty(grid):
    assert grid.count_particles() == 0
    assert grid.get((0, 0)) == EMPTY
    assert grid.get((99, 99)) == EMPTY
    assert not grid.velocities.any()


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (100, 0), (0, 100), (-5, 200)])
def test_get_out_of_bounds_is_none(grid, coord):
    assert grid.get(coord) is None
    assert not grid.in_bounds(coord)


def test_set_then_get_particle(grid):
    grid.set((3, 7), Particle((1.5, -2.0)))
    assert grid.get((3, 7)) == Particle((1.5, -2.0))
    # storage is [y, x]
    assert grid.kinds[7, 3] == 1
    assert grid.get((7, 3)) == EMPTY


def test_set_empty_drops_velocity(grid):
    grid.set((4, 4), Particle((3.0, 3.0)))
    grid.set((4, 4), EMPTY)
    assert grid.get((4, 4)) == EMPTY
    np.testing.assert_array_equal(grid.velocities[4, 4], [0.0, 0.0])


@pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (100, 5), (5, 100)])
def test_set_out_of_bounds_raises(grid, coord):
    with pytest.raises(IndexError):
        grid.set(coord, Particle())
    assert grid.count_particles() == 0


def test_swap_exchanges_cells(grid):
    grid.set((1, 1), Particle((0.5, 0.25)))
    grid.swap((1, 1), (2, 1))
    assert grid.get((1, 1)) == EMPTY
    assert grid.get((2, 1)) == Particle((0.5, 0.25))
    np.testing.assert_array_equal(grid.velocities[1, 1], [0.0, 0.0])


def test_swap_two_particles(grid):
    grid.set((0, 0), Particle((1.0, 0.0)))
    grid.set((0, 1), Particle((0.0, 1.0)))
    grid.swap((0, 0), (0, 1))
    assert grid.get((0, 0)) == Particle((0.0, 1.0))
    assert grid.get((0, 1)) == Particle((1.0, 0.0))


def test_swap_out_of_bounds_is_noop(grid):
    grid.set((0, 0), Particle((1.0, 1.0)))
    grid.swap((0, 0), (-1, 0))
    grid.swap((100, 0), (0, 0))
    assert grid.get((0, 0)) == Particle((1.0, 1.0))
    assert grid.count_particles() == 1


def test_clear(grid):
    grid.set((10, 10), Particle((1.0, 1.0)))
    grid.clear()
    assert grid.count_particles() == 0
    assert not grid.velocities.any()


def test_particle_coordinates_in_sweep_order(grid):
    for coord in [(5, 2), (1, 2), (9, 0)]:
        grid.set(coord, Particle())
    assert list(grid.particle_coordinates()) == [(9, 0), (1, 2), (5, 2)]


def test_to_pixels_single_particle(grid):
    grid.set((5, 5), Particle((4.0, -1.0)))
    pixels = grid.to_pixels()
    assert len(pixels) == 100 * 100 * 4
    offset = (5 * 100 + 5) * 4
    assert tuple(pixels[offset:offset + 4]) == PARTICLE_COLOR
    rest = pixels[:offset] + pixels[offset + 4:]
    assert rest == bytes(EMPTY_COLOR) * (100 * 100 - 1)


def test_to_pixels_is_row_major():
    g = Grid(4)
    g.set((3, 1), Particle())
    pixels = g.to_pixels()
    # row y=1, column x=3
    offset = (1 * 4 + 3) * 4
    assert tuple(pixels[offset:offset + 4]) == PARTICLE_COLOR
    assert tuple(pixels[(3 * 4 + 1) * 4:(3 * 4 + 1) * 4 + 4]) == EMPTY_COLOR


def test_to_pixels_ignores_velocity():
    a, b = Grid(3), Grid(3)
    a.set((1, 1), Particle((0.0, 0.0)))
    b.set((1, 1), Particle((9.0, -9.0)))
    assert a.to_pixels() == b.to_pixels()
