"""Grid panel: world pixels scaled into a rect with a thin grey border. Row y=0 is drawn at the bottom."""

import numpy as np
import pygame

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1
WORM_COLOR = (200, 60, 90)


def pixels_to_surface(pixels: bytes, side: int) -> pygame.Surface:
    """RGBA bytes (row y=0 first) -> side x side surface with y=0 as the bottom row."""
    rgba = np.frombuffer(pixels, dtype=np.uint8).reshape(side, side, 4)
    # Empty is opaque white and sand is transparent black; drop alpha so sand shows black.
    rgb = np.ascontiguousarray(rgba[::-1, :, :3])
    try:
        return pygame.image.fromstring(rgb.tobytes(), (side, side), "RGB")
    except TypeError:
        return pygame.image.frombytes(rgb.tobytes(), (side, side), "RGB")


def world_to_screen(position, side: int, rect: pygame.Rect) -> tuple[int, int]:
    x, y = position
    sx = rect.x + (x + 0.5) * rect.width / side
    sy = rect.y + (side - y - 0.5) * rect.height / side
    return int(sx), int(sy)


def screen_to_world(point: tuple[int, int], side: int, rect: pygame.Rect) -> tuple[float, float]:
    px, py = point
    x = (px - rect.x) * side / rect.width
    y = side - (py - rect.y) * side / rect.height
    return x, y


def draw_pixels(surface: pygame.Surface, rect: pygame.Rect, pixels: bytes, side: int) -> None:
    img = pixels_to_surface(pixels, side)
    scaled = pygame.transform.scale(img, (rect.width, rect.height))
    surface.blit(scaled, rect.topleft)
    pygame.draw.rect(surface, BORDER_COLOR, rect, BORDER_PX)


def draw_worm(surface: pygame.Surface, rect: pygame.Rect, worm, side: int) -> None:
    radius = max(2, rect.width // side)
    for segment in [worm.head] + worm.segments:
        pygame.draw.circle(surface, WORM_COLOR, world_to_screen(segment.position, side, rect), radius, 1)
