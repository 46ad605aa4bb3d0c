import random

import pytest

from cryptgen.dungeon import DungeonConfig, Map, Point, Rect, Tile
from cryptgen.dungeon.rooms import carve_rooms, place_rooms
from tests.dungeon_test_utils import ScriptedRng


@pytest.mark.parametrize("seed", [1, 7, 99, 2024, 31337])
def test_rooms_sit_on_lattice_inside_inset_bounds(seed):
    cfg = DungeonConfig()
    rooms, attempts = place_rooms(cfg, random.Random(seed))
    assert 1 <= len(rooms) <= cfg.max_rooms
    assert 1 <= attempts <= cfg.placement_attempts
    inset = Rect(Point(1, 1), Point(cfg.width - 1, cfg.height - 1))
    for room in rooms:
        assert room.a.x % 2 == 1 and room.a.y % 2 == 1
        assert room.b.x % 2 == 0 and room.b.y % 2 == 0
        assert room.width in (5, 7, 9)
        assert room.height in (3, 5, 7)
        assert inset.contains_rect(room)


@pytest.mark.parametrize("seed", [3, 11, 123])
def test_expanded_rooms_never_overlap(seed):
    rooms, _ = place_rooms(DungeonConfig(), random.Random(seed))
    for i, j in ((i, j) for i in range(len(rooms)) for j in range(len(rooms)) if i != j):
        assert not rooms[i].expanded(2).intersects(rooms[j])


def test_attempt_cap_limits_room_count():
    rooms, attempts = place_rooms(DungeonConfig(placement_attempts=1), random.Random(5))
    assert attempts == 1
    assert len(rooms) == 1


def test_placement_draw_order_and_rect_formula():
    rng = ScriptedRng(ints=[3, 2, 0, 0])
    rooms, attempts = place_rooms(DungeonConfig(max_rooms=1), rng)
    # places = ((79 - 2) // 2, (41 - 2) // 2) = (38, 19)
    assert rng.calls == [(3, 5), (2, 4), (0, 35), (0, 17)]
    assert rooms == [Rect(Point(1, 1), Point(6, 4))]
    assert attempts == 1


def test_overlapping_candidate_is_rejected():
    # Second attempt lands two lattice cells to the right: inside the padding.
    rng = ScriptedRng(ints=[3, 2, 0, 0, 3, 2, 2, 0, 3, 2, 10, 0])
    rooms, attempts = place_rooms(DungeonConfig(max_rooms=2), rng)
    assert attempts == 3
    assert rooms == [Rect(Point(1, 1), Point(6, 4)), Rect(Point(21, 1), Point(26, 4))]


def test_carve_rooms_fills_wall_then_floor():
    m = Map(21, 11)
    rooms = [Rect(Point(1, 1), Point(6, 4)), Rect(Point(11, 5), Point(18, 10))]
    carve_rooms(m, rooms)
    assert m.count(Tile.VOID) == 0
    assert m.count(Tile.FLOOR) == 5 * 3 + 7 * 5
    for room in rooms:
        assert all(m.tile(p) is Tile.FLOOR for p in room.cells())
    assert m.tile(Point(0, 0)) is Tile.WALL
    assert m.tile(Point(6, 1)) is Tile.WALL
