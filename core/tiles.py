from enum import Enum

import pygame


class TileKind(Enum):
    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    GOLD = "gold"
    HEALTH = "health"
    SPIKES = "spikes"
    WARP = "warp"
    EXIT = "exit"


# Map text character -> tile kind. 'b' and 'p' are floors with extras.
TILE_CODES = {
    "w": TileKind.WALL,
    ".": TileKind.FLOOR,
    "g": TileKind.GOLD,
    "d": TileKind.DOOR,
    "b": TileKind.FLOOR,
    "s": TileKind.SPIKES,
    "h": TileKind.HEALTH,
    "p": TileKind.FLOOR,
}

# Tiles whose box edges occlude light while they keep their kind
BLOCKING_KINDS = (TileKind.DOOR, TileKind.SPIKES)


class CaveObject:
    """Interactive thing found while compiling a map (gold, door, health)."""

    def __init__(self, kind, tile, position, cost=None):
        self.kind = kind
        self.tile = tile
        self.position = pygame.Vector2(position)
        self.cost = cost

    def __repr__(self):
        cost = f", cost={self.cost}" if self.cost is not None else ""
        return f"CaveObject({self.kind.name}, {self.tile}{cost})"


def tile_at(tiles, coord):
    """Tile kind at coord. The map is sparse: anything missing is a wall."""
    return tiles.get(coord, TileKind.WALL)


def world_to_tile(pos, tile_width):
    return int(pos[0] // tile_width), int(pos[1] // tile_width)


def tile_to_world(coord, tile_width):
    return pygame.Vector2(coord[0] * tile_width, coord[1] * tile_width)
