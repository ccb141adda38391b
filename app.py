"""
App shell: display and main loop. The world ticks on a fixed interval
(tick_interval seconds) independent of frame rate. Each tick: spawn a grain
at the top center if free, move the worm, step the world with the worm's
forces. Hold the left mouse button to steer the worm toward the cursor.
"""

import logging
import random

import pygame

import config
from logging_config import setup_logging
from ui import draw_fps, draw_pixels, draw_worm, screen_to_world
from world import Grid, Worm, spawn_particle, step

TITLE = "Sandfall"
BACKGROUND = (0, 0, 0)
# Never run more than this many ticks in one frame after a stall.
MAX_TICKS_PER_FRAME = 4

logger = logging.getLogger(__name__)


def _make_worm(cfg: dict, side: int) -> Worm:
    w = cfg["worm"]
    return Worm(
        segment_count=int(w["segments"]),
        position=(side * 0.5, side * 0.5),
        direction=(1.0, 0.0),
        segment_length=float(w["segment_length"]),
        speed=float(w["speed"]),
    )


def run(config_path: str | None = None) -> None:
    cfg = config.load_config(config_path)
    setup_logging(getattr(logging, str(cfg["log_level"]).upper(), logging.INFO))

    side = int(cfg["world"]["side"])
    seed = int(cfg["seed"])
    if seed == -1:
        seed = random.randint(0, 2**31 - 1)
    rng = random.Random(seed)
    logger.info("World %dx%d, seed %d", side, side, seed)

    pygame.init()
    width, height = cfg["window"]["width"], cfg["window"]["height"]
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    grid_rect = pygame.Rect(0, 0, width, height)

    grid = Grid(side)
    worm = _make_worm(cfg, side)
    tick_interval = max(1e-3, float(cfg["tick_interval"]))
    tick_accum = 0.0
    total_ticks = 0
    running = True

    while running:
        dt_s = clock.tick(60) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    grid.clear()
                    logger.info("Grid cleared at tick %d", total_ticks)

        if pygame.mouse.get_pressed()[0]:
            worm.steer_toward(screen_to_world(pygame.mouse.get_pos(), side, grid_rect), dt_s)

        tick_accum += dt_s
        num_ticks = min(int(tick_accum / tick_interval), MAX_TICKS_PER_FRAME)
        tick_accum = min(tick_accum - num_ticks * tick_interval, MAX_TICKS_PER_FRAME * tick_interval)
        for _ in range(num_ticks):
            if cfg["spawn"]:
                spawn_particle(grid, rng=rng)
            step(grid, worm.forces(), rng)
            total_ticks += 1

        screen.fill(BACKGROUND)
        draw_pixels(screen, grid_rect, grid.to_pixels(), side)
        draw_worm(screen, grid_rect, worm, side)
        draw_fps(screen, clock.get_fps(), total_ticks, grid.count_particles())
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    run()
