"""FPS and tick readout in the top-left corner."""

import pygame

FONT_SIZE = 20
TEXT_COLOR = (200, 30, 30)
MARGIN = 6

_font = None


def _ensure_font() -> pygame.font.Font:
    global _font
    if _font is None:
        _font = pygame.font.Font(None, FONT_SIZE)
    return _font


def draw_fps(surface: pygame.Surface, fps: float, tick_count: int = 0, particles: int = 0) -> None:
    font = _ensure_font()
    text = f"{round(fps)} FPS  tick {tick_count}  sand {particles}"
    surface.blit(font.render(text, True, TEXT_COLOR), (MARGIN, MARGIN))
