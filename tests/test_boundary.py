import pygame
import pytest

from settings import DEFAULT_MAP
from core.boundary import compile_boundary, compile_map, parse_door_costs
from core.errors import MapParseError
from core.tiles import TileKind, tile_at

TW = 28

ROOM_4X4 = "0\nwwww\nw..w\nwp.w\nwwww"


def _room(width, height):
    """Map text for a width x height floor room inside a one-tile wall."""
    rows = ["w" * (width + 2)]
    rows += ["w" + "." * width + "w" for _ in range(height)]
    rows += ["w" * (width + 2)]
    return "0\n" + "\n".join(rows)


def _unit_edges(segment):
    """Split an axis-aligned segment into one-tile pieces (midpoint, normal)."""
    steps = int(round(segment.length() / TW))
    axis = segment.axis()
    for i in range(steps):
        mid = segment.begin + axis * (TW * i + TW / 2)
        yield mid, segment.normal()


def _cell(point):
    return int(point.x // TW), int(point.y // TW)


def test_four_by_four_room_segments():
    info = compile_map(ROOM_4X4, TW)

    keys = [s.key() for s in info.segments]
    assert keys == [
        ((0, 112), (0, 0)),       # outer west
        ((0, 0), (112, 0)),       # outer north
        ((84, 28), (28, 28)),     # room north side
        ((112, 0), (112, 112)),   # outer east
        ((28, 28), (28, 84)),     # room west side
        ((84, 84), (84, 28)),     # room east side
        ((112, 112), (0, 112)),   # outer south, started at cell (0, 3)
        ((28, 84), (84, 84)),     # room south side, started at cell (1, 3)
    ]
    # Room sides plus the frame facing the off-grid neighbours
    assert len(info.segments) == 8
    assert info.spawn == pygame.Vector2(1 * TW, 2 * TW)


def test_four_by_four_room_tiles():
    info = compile_map(ROOM_4X4, TW)

    assert len(info.tiles) == 16
    floors = [c for c, k in info.tiles.items() if k == TileKind.FLOOR]
    assert sorted(floors) == [(1, 1), (1, 2), (2, 1), (2, 2)]
    assert info.objects == []


@pytest.mark.parametrize("width,height", [(1, 1), (2, 5), (6, 3), (9, 9)])
def test_rectangular_room_is_one_segment_per_side(width, height):
    info = compile_map(_room(width, height), TW)

    room_left, room_top = TW, TW
    room_right, room_bottom = TW * (width + 1), TW * (height + 1)
    room_sides = [
        s for s in info.segments
        if room_left <= s.begin.x <= room_right
        and room_top <= s.begin.y <= room_bottom
        and room_left <= s.end.x <= room_right
        and room_top <= s.end.y <= room_bottom
    ]

    assert len(info.segments) == 8
    assert len(room_sides) == 4
    lengths = sorted(s.length() for s in room_sides)
    assert lengths == sorted([width * TW, width * TW, height * TW, height * TW])


def test_single_wall_tile_has_four_edges():
    segments = compile_boundary([(2, 3)], TW)

    assert [s.key() for s in segments] == [
        ((56, 112), (56, 84)),
        ((56, 84), (84, 84)),
        ((84, 84), (84, 112)),
        ((84, 112), (56, 112)),
    ]


def test_segments_separate_wall_from_open_space():
    with open(DEFAULT_MAP) as f:
        info = compile_map(f.read(), TW)
    walls = {c for c, k in info.tiles.items() if k == TileKind.WALL}

    for segment in info.segments:
        for mid, normal in _unit_edges(segment):
            front = _cell(mid + normal * (TW / 2))
            back = _cell(mid - normal * (TW / 2))
            assert back in walls
            assert front not in walls


def test_no_overlapping_segments():
    with open(DEFAULT_MAP) as f:
        info = compile_map(f.read(), TW)

    pieces = []
    for segment in info.segments:
        for mid, _ in _unit_edges(segment):
            pieces.append((mid.x, mid.y))
    assert len(pieces) == len(set(pieces))


def test_straight_wall_run_merges():
    # A three-tile horizontal wall bar floating in open space
    segments = compile_boundary([(0, 0), (1, 0), (2, 0)], TW)

    assert len(segments) == 4
    north = [s for s in segments if s.begin.y == s.end.y == 0][0]
    assert north.key() == ((0, 0), (84, 0))


def test_compile_is_repeatable():
    with open(DEFAULT_MAP) as f:
        text = f.read()
    first = compile_map(text, TW)
    second = compile_map(text, TW)

    assert sorted(s.key() for s in first.segments) == \
        sorted(s.key() for s in second.segments)
    assert first.spawn == second.spawn
    assert repr(first.objects) == repr(second.objects)


def test_objects_in_reading_order_with_door_costs():
    info = compile_map("4,7\nwgdh\n.dbw", TW)

    assert [(o.kind, o.tile, o.cost) for o in info.objects] == [
        (TileKind.GOLD, (1, 0), None),
        (TileKind.DOOR, (2, 0), 4),
        (TileKind.HEALTH, (3, 0), None),
        (TileKind.DOOR, (1, 1), 7),
    ]
    assert info.objects[1].position == pygame.Vector2(2 * TW, 0)
    assert info.door_costs() == {(2, 0): 4, (1, 1): 7}
    assert info.decorated == {(2, 1)}


def test_unknown_characters_are_empty():
    info = compile_map("0\nw?x.", TW)

    assert info.tiles == {(0, 0): TileKind.WALL, (3, 0): TileKind.FLOOR}
    assert tile_at(info.tiles, (1, 0)) == TileKind.WALL


def test_spawn_defaults_to_origin():
    info = compile_map("0\nw..w", TW)
    assert info.spawn == pygame.Vector2(0, 0)


def test_door_without_cost_fails():
    with pytest.raises(MapParseError):
        compile_map("\nwwww\nwdpw\nwwww", TW)


def test_more_doors_than_costs_fails():
    with pytest.raises(MapParseError):
        compile_map("5\nwddw", TW)


def test_bad_door_cost_fails():
    with pytest.raises(MapParseError):
        compile_map("5,x\nwdw", TW)


def test_empty_text_fails():
    with pytest.raises(MapParseError):
        compile_map("", TW)


def test_parse_door_costs():
    assert parse_door_costs("3, 5 ,8") == [3, 5, 8]
    assert parse_door_costs("") == []
    assert parse_door_costs("   ") == []
