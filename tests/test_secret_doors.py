import pytest

from cryptgen.dungeon import DungeonGenerationError, Direction, Map, Point, Tile
from cryptgen.dungeon.secret_doors import (
    enumerate_intersections,
    is_intersection,
    place_secret_passages,
    seal_passage,
)
from tests.dungeon_test_utils import ScriptedRng

BRANCH = Point(7, 3)


def test_only_corridor_branches_count_as_intersections(crossroads):
    assert enumerate_intersections(crossroads) == [BRANCH]
    # room cells have walkable diagonals
    assert not is_intersection(crossroads, Point(3, 3))
    # straight corridor
    assert not is_intersection(crossroads, Point(7, 5))
    assert not is_intersection(crossroads, Point(0, 0))


def test_open_room_has_no_intersections():
    m = Map.from_lines(["#####", "#...#", "#...#", "#...#", "#####"])
    assert enumerate_intersections(m) == []


def test_seal_runs_to_next_branch(crossroads):
    passage = seal_passage(crossroads, BRANCH, Direction.SOUTH)
    assert passage.origin == BRANCH
    assert (passage.start, passage.end) == (Point(7, 4), Point(7, 7))
    assert passage.cells == [Point(7, 4), Point(7, 5), Point(7, 6), Point(7, 7)]
    assert crossroads.tile(Point(7, 4)) is Tile.SECRET_DOOR
    assert crossroads.tile(Point(7, 7)) is Tile.SECRET_DOOR
    assert crossroads.tile(Point(7, 5)) is Tile.FLOOR
    assert crossroads.tile(Point(7, 6)) is Tile.FLOOR


def test_seal_stops_at_room_mouth(crossroads):
    passage = seal_passage(crossroads, BRANCH, Direction.WEST)
    assert passage.cells == [Point(6, 3), Point(5, 3), Point(4, 3)]
    assert passage.end == Point(4, 3)
    assert crossroads.tile(Point(4, 3)) is Tile.SECRET_DOOR
    assert crossroads.tile(Point(3, 3)) is Tile.FLOOR


def test_seal_beside_room_is_a_single_door(crossroads):
    passage = seal_passage(crossroads, BRANCH, Direction.EAST)
    assert passage.start == passage.end == Point(8, 3)
    assert passage.cells == [Point(8, 3)]
    assert crossroads.count(Tile.SECRET_DOOR) == 1


def test_walk_into_existing_seal_ends_there(crossroads):
    crossroads.set(Point(7, 7), Tile.SECRET_DOOR)
    passage = seal_passage(crossroads, BRANCH, Direction.SOUTH)
    assert passage.end == Point(7, 7)
    assert passage.cells[-2:] == [Point(7, 6), Point(7, 7)]
    assert crossroads.tile(Point(7, 6)) is Tile.FLOOR
    assert crossroads.count(Tile.SECRET_DOOR) == 2


def test_walk_without_branch_hits_step_cap(crossroads):
    with pytest.raises(DungeonGenerationError) as exc:
        seal_passage(crossroads, BRANCH, Direction.SOUTH, max_steps=1)
    assert exc.value.phase == "secret_doors"


def test_direction_redrawn_until_exit_is_open(crossroads):
    # 0 -> NORTH is wall, 2 -> SOUTH is open
    rng = ScriptedRng(ints=[0, 2], floats=[0.1])
    passages = place_secret_passages(crossroads, rng, [BRANCH], chance=0.2)
    assert rng.calls == [(0, 3), (0, 3)]
    assert len(passages) == 1
    assert passages[0].end == Point(7, 7)


def test_roll_above_chance_leaves_intersection_open(crossroads):
    rng = ScriptedRng(floats=[0.5])
    assert place_secret_passages(crossroads, rng, [BRANCH], chance=0.2) == []
    assert rng.calls == []
    assert crossroads.count(Tile.SECRET_DOOR) == 0


def test_dead_end_without_seal_closes_on_last_step():
    m = Map.from_lines(["#######", "#.....#", "#######"])
    passage = seal_passage(m, Point(1, 1), Direction.EAST)
    assert passage.cells == [Point(2, 1), Point(3, 1), Point(4, 1)]
    assert (passage.start, passage.end) == (Point(2, 1), Point(4, 1))
    assert m.tile(Point(4, 1)) is Tile.SECRET_DOOR
    # the dead-end cell itself stays open
    assert m.tile(Point(5, 1)) is Tile.FLOOR
