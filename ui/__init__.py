"""UI: world pixels, worm overlay, HUD."""

from ui.grid_view import draw_pixels, draw_worm, screen_to_world, world_to_screen
from ui.hud import draw_fps

__all__ = ["draw_pixels", "draw_worm", "screen_to_world", "world_to_screen", "draw_fps"]
