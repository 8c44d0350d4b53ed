import logging

import pygame

from settings import TILE_WIDTH, DARKNESS_COLOR
from core.animation import cycle_color
from core.boundary import compile_map
from core.collision import assemble_collision_set
from core.tiles import TileKind, tile_at
from core.visibility import VisibilityConfig, build_visibility, point_in_polygon
from data.tile_stats import TILE_STATS

logger = logging.getLogger(__name__)

# Tile kinds drawn on top of the floor, by TILE_STATS entry
_OVERLAY_STYLES = {
    TileKind.GOLD: "gold",
    TileKind.DOOR: "door",
    TileKind.HEALTH: "health",
    TileKind.SPIKES: "spikes",
    TileKind.WARP: "warp",
    TileKind.EXIT: "exit",
}


class CaveMap:
    def __init__(self, map_info, tile_width=TILE_WIDTH):
        self.tile_width = tile_width
        self.tiles = map_info.tiles
        self.segments = map_info.segments
        self.spawn = pygame.Vector2(map_info.spawn)
        self.objects = map_info.objects
        self.decorated = map_info.decorated
        self._door_costs = map_info.door_costs()
        self.light = None

    @classmethod
    def from_text(cls, text, tile_width=TILE_WIDTH):
        return cls(compile_map(text, tile_width), tile_width)

    @classmethod
    def from_file(cls, path, tile_width=TILE_WIDTH):
        """Construct a CaveMap from a map text file."""
        with open(path, "r") as f:
            text = f.read()
        logger.info("Loading cave map %s", path)
        return cls.from_text(text, tile_width)

    # =====================================================
    # TILES
    # =====================================================

    def tile_at(self, coord):
        return tile_at(self.tiles, coord)

    def set_tile(self, coord, kind):
        logger.debug("Tile %s: %s -> %s", coord,
                     self.tile_at(coord).name, kind.name)
        self.tiles[coord] = kind

    def door_cost(self, coord):
        return self._door_costs.get(coord, 0)

    # =====================================================
    # VISIBILITY
    # =====================================================

    def update_visibility(self, view_center, screen_size, config=None):
        """Recompute the light mesh for this frame around view_center."""
        collision = assemble_collision_set(
            self.segments, self.tiles, view_center, screen_size,
            self.tile_width,
        )
        config = config or VisibilityConfig(screen_size)
        self.light = build_visibility(view_center, collision, config)
        return self.light

    def is_visible(self, x, y):
        """Check if a map-space point is inside the current light ring."""
        if self.light is None:
            return True
        return point_in_polygon(x, y, self.light.ring)

    # =====================================================
    # DRAW
    # =====================================================

    def _tile_rect(self, coord, camera):
        w = self.tile_width
        x, y = camera.apply(pygame.Vector2(coord) * w)
        return pygame.Rect(round(x), round(y), w, w)

    def draw_floor(self, screen, camera, time):
        floor = cycle_color(TILE_STATS["floor"]["colors"],
                            TILE_STATS["floor"]["period"], time)
        blood = cycle_color(TILE_STATS["blood"]["colors"],
                            TILE_STATS["blood"]["period"], time)
        for coord, kind in self.tiles.items():
            if kind == TileKind.WALL:
                continue
            color = blood if coord in self.decorated else floor
            pygame.draw.rect(screen, color, self._tile_rect(coord, camera))

    def draw_objects(self, screen, camera, time):
        half = self.tile_width / 2
        for coord, kind in self.tiles.items():
            style = _OVERLAY_STYLES.get(kind)
            if style is None:
                continue
            # Pickups outside the light stay hidden
            x, y = coord[0] * self.tile_width + half, coord[1] * self.tile_width + half
            if kind in (TileKind.GOLD, TileKind.HEALTH) and not self.is_visible(x, y):
                continue
            stats = TILE_STATS[style]
            color = cycle_color(stats["colors"], stats["period"], time)
            pygame.draw.rect(screen, color, self._tile_rect(coord, camera))

    def draw_walls(self, screen, camera, time):
        stats = TILE_STATS["walls"]
        color = cycle_color(stats["colors"], stats["period"], time)
        for coord, kind in self.tiles.items():
            if kind == TileKind.WALL:
                pygame.draw.rect(screen, color, self._tile_rect(coord, camera))

    def draw_visibility(self, screen, camera):
        """Darken everything outside the current light mesh."""
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(DARKNESS_COLOR)
        if self.light is not None:
            # Transparent fill punches the lit area out of the overlay
            self.light.draw(overlay, camera.offset, (0, 0, 0, 0))
        screen.blit(overlay, (0, 0))
