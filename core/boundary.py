"""Compile cave map text into tiles, objects and merged wall edges.

Map text format::

    5,10          <- door costs, used by doors in reading order
    wwwww
    wp.dw         <- one character per tile
    wwwww

Wall boundaries are emitted as oriented segments, with straight runs
along a wall merged into one segment instead of one per tile edge.
"""

import logging

import pygame

from settings import TILE_WIDTH
from core.errors import MapParseError
from core.geometry import Segment
from core.tiles import TILE_CODES, CaveObject, TileKind

logger = logging.getLogger(__name__)

_OFFSETS = {
    "west": (-1, 0),
    "north": (0, -1),
    "east": (1, 0),
    "south": (0, 1),
}

# side, neighbour whose run it extends, begin corner, end corner,
# endpoint pushed along when the run grows
_SIDES = (
    ("west", "north", (0, 1), (0, 0), "begin"),
    ("north", "west", (0, 0), (1, 0), "end"),
    ("east", "north", (1, 0), (1, 1), "end"),
    ("south", "west", (1, 1), (0, 1), "begin"),
)

_OBJECT_KINDS = (TileKind.GOLD, TileKind.DOOR, TileKind.HEALTH)


class BoundaryCell:
    """Segment index used by each side of one wall tile, while compiling."""

    def __init__(self):
        self.north = None
        self.south = None
        self.east = None
        self.west = None


class MapInfo:
    def __init__(self, tiles, segments, spawn, objects, decorated=None):
        self.tiles = tiles
        self.segments = segments
        self.spawn = spawn
        self.objects = objects
        self.decorated = decorated if decorated is not None else set()

    def door_costs(self):
        return {obj.tile: obj.cost for obj in self.objects
                if obj.kind == TileKind.DOOR}


def parse_door_costs(line):
    """Parse the header line. A blank header means no doors are priced."""
    if not line.strip():
        return []
    costs = []
    for token in line.split(","):
        try:
            costs.append(int(token.strip()))
        except ValueError:
            raise MapParseError(
                f"door cost {token.strip()!r} is not an integer"
            ) from None
    return costs


def compile_map(text, tile_width=TILE_WIDTH):
    """Build a MapInfo from map text. Raises MapParseError on bad input."""
    lines = text.splitlines()
    if not lines:
        raise MapParseError("map text is empty, expected a door cost line")

    door_costs = parse_door_costs(lines[0])
    next_door = 0

    tiles = {}
    objects = []
    decorated = set()
    walls = []
    spawn = pygame.Vector2(0, 0)

    for y, row in enumerate(lines[1:]):
        for x, char in enumerate(row):
            kind = TILE_CODES.get(char)
            if kind is None:
                continue
            coord = (x, y)
            position = pygame.Vector2(x * tile_width, y * tile_width)
            tiles[coord] = kind

            if kind == TileKind.WALL:
                walls.append(coord)
            elif char == "p":
                spawn = position
            elif char == "b":
                decorated.add(coord)

            if kind not in _OBJECT_KINDS:
                continue
            cost = None
            if kind == TileKind.DOOR:
                if next_door >= len(door_costs):
                    raise MapParseError(
                        f"door at {coord} has no cost; header lists "
                        f"{len(door_costs)} cost(s)"
                    )
                cost = door_costs[next_door]
                next_door += 1
            objects.append(CaveObject(kind, coord, position, cost))

    if next_door < len(door_costs):
        logger.debug("Ignoring %d unused door cost(s)",
                     len(door_costs) - next_door)

    segments = compile_boundary(walls, tile_width)
    logger.info("Compiled map: %d tiles, %d walls, %d boundary segments, "
                "%d objects", len(tiles), len(walls), len(segments),
                len(objects))
    return MapInfo(tiles, segments, spawn, objects, decorated)


def compile_boundary(wall_cells, tile_width=TILE_WIDTH):
    """Merged boundary segments around wall cells.

    wall_cells must be in row-major order (top row first, left to right)
    so the north and west neighbours of a cell are visited before it.
    """
    walls = set(wall_cells)
    scratch = {}
    segments = []

    for x, y in wall_cells:
        pos = pygame.Vector2(x * tile_width, y * tile_width)
        cell = BoundaryCell()

        for side, run_from, begin, end, grown in _SIDES:
            dx, dy = _OFFSETS[side]
            if (x + dx, y + dy) in walls:
                continue

            rx, ry = _OFFSETS[run_from]
            neighbour = scratch.get((x + rx, y + ry))
            index = getattr(neighbour, side) if neighbour is not None else None

            if index is None:
                segments.append(Segment(
                    pos + pygame.Vector2(begin) * tile_width,
                    pos + pygame.Vector2(end) * tile_width,
                ))
                index = len(segments) - 1
            else:
                # Push the shared endpoint one tile away from the neighbour
                edge = segments[index]
                step = pygame.Vector2(-rx, -ry) * tile_width
                setattr(edge, grown, getattr(edge, grown) + step)

            setattr(cell, side, index)

        scratch[(x, y)] = cell

    return segments
