import pygame

from core.geometry import Segment
from core.tiles import BLOCKING_KINDS


def tile_box_segments(coord, tile_width):
    """Four outward-facing edges around one tile: top, right, bottom, left."""
    p = pygame.Vector2(coord[0] * tile_width, coord[1] * tile_width)
    w = tile_width
    return [
        Segment(p, p + (w, 0)),
        Segment(p + (w, 0), p + (w, w)),
        Segment(p + (w, w), p + (0, w)),
        Segment(p + (0, w), p),
    ]


def blocking_tile_segments(tiles, tile_width, kinds=BLOCKING_KINDS):
    """Box edges of every tile whose current kind blocks light."""
    segments = []
    for coord, kind in tiles.items():
        if kind in kinds:
            segments.extend(tile_box_segments(coord, tile_width))
    return segments


def screen_border_segments(center, screen_size):
    """Viewport frame around center, facing inward so rays stop on it."""
    size = pygame.Vector2(screen_size)
    start = pygame.Vector2(center) - size / 2
    return [
        Segment(start, start + (size.x, 0)).reverse_normal(),
        Segment(start + (size.x, 0), start + size).reverse_normal(),
        Segment(start + size, start + (0, size.y)).reverse_normal(),
        Segment(start + (0, size.y), start).reverse_normal(),
    ]


def assemble_collision_set(static_segments, tiles, view_center, screen_size,
                           tile_width):
    """All segments blocking light this frame.

    Static map boundary, then the viewport frame, then the boxes of
    doors and spikes that are still in place.
    """
    collision = list(static_segments)
    collision.extend(screen_border_segments(view_center, screen_size))
    collision.extend(blocking_tile_segments(tiles, tile_width))
    return collision
