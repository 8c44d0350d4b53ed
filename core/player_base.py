import logging

import pygame

from settings import TILE_WIDTH
from core.animation import Tween, cycle_color
from core.tiles import TileKind, world_to_tile

logger = logging.getLogger(__name__)


class Player:
    def __init__(self, position, stats, tile_width=TILE_WIDTH):
        # -----------------------------
        # Position / Movement
        # -----------------------------
        # pos is the top-left of the occupied tile; the tween lags behind it
        self.pos = pygame.Vector2(position)
        self.tile_width = tile_width
        self.freeze_time = stats["freeze_time"]
        self.freeze_timer = 0.0
        self.tween = Tween(self.pos, self.pos, 0.0)

        # -----------------------------
        # Inventory / Health
        # -----------------------------
        self.gold = 0
        self.health = stats["start_health"]

        # -----------------------------
        # Look
        # -----------------------------
        self.colors = stats["colors"]
        self.color_period = stats["color_period"]
        self.corner_radius = stats["corner_radius"]

    @property
    def tile(self):
        return world_to_tile(self.pos, self.tile_width)

    @property
    def draw_pos(self):
        return self.tween.value()

    @property
    def center(self):
        """Middle of the drawn tile; the light is cast from here."""
        half = self.tile_width / 2
        return self.draw_pos + pygame.Vector2(half, half)

    # =====================================================
    # UPDATE
    # =====================================================

    def update(self, dt, input_manager, cave_map):
        self.tween.update(dt)

        if self.freeze_timer > 0:
            self.freeze_timer -= dt
            return

        held = [input_manager.is_down(a) for a in
                ("move_up", "move_down", "move_left", "move_right")]
        if not any(held):
            return

        up, down, left, right = held
        step = pygame.Vector2(right - left, down - up) * self.tile_width
        self.freeze_timer = self.freeze_time
        self.try_move(self.pos + step, cave_map)

    # =====================================================
    # MOVEMENT
    # =====================================================

    def try_move(self, target, cave_map):
        """Step onto the tile under target if its kind allows it.

        Returns True if the player moved.
        """
        coord = world_to_tile(target, self.tile_width)
        kind = cave_map.tile_at(coord)

        if kind == TileKind.FLOOR:
            pass
        elif kind == TileKind.GOLD:
            cave_map.set_tile(coord, TileKind.FLOOR)
            self.gold += 1
        elif kind == TileKind.HEALTH:
            cave_map.set_tile(coord, TileKind.FLOOR)
            self.health += 1
        elif kind == TileKind.DOOR:
            cost = cave_map.door_cost(coord)
            if self.gold < cost:
                return False
            self.gold -= cost
            cave_map.set_tile(coord, TileKind.FLOOR)
            logger.debug("Opened door at %s for %d gold", coord, cost)
        elif kind == TileKind.SPIKES:
            self.health -= 1
            return False
        else:
            # Walls, warps and exits don't let the player in
            return False

        self._move_to(target)
        return True

    def _move_to(self, target):
        self.tween = Tween(self.draw_pos, target, self.freeze_time)
        self.pos = pygame.Vector2(target)

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, camera, time):
        color = cycle_color(self.colors, self.color_period, time)
        x, y = camera.apply(self.draw_pos)
        rect = pygame.Rect(round(x), round(y), self.tile_width, self.tile_width)
        pygame.draw.rect(screen, color, rect,
                         border_radius=self.corner_radius)
