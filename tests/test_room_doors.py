from cryptgen.dungeon import Map, Point, Rect, Tile
from cryptgen.dungeon.doors import place_room_doors, room_door_sites

ROOM = Rect(Point(3, 3), Point(8, 6))
LAYOUT = [
    "###########",
    "#####.#####",
    "#####.#####",
    "##S.....###",
    "###.....###",
    "###......##",
    "####.######",
    "###########",
    "###########",
]


def test_sites_every_other_cell_around_the_ring():
    sites = room_door_sites(ROOM)
    assert len(sites) == 10
    assert Point(5, 2) in sites and Point(5, 6) in sites
    assert Point(2, 3) in sites and Point(8, 5) in sites
    # even columns are skipped
    assert Point(4, 6) not in sites
    assert all(not ROOM.contains(p) for p in sites)


def test_open_sites_become_closed_doors():
    m = Map.from_lines(LAYOUT)
    placed = place_room_doors(m, [ROOM])
    assert placed == 2
    assert m.tile(Point(5, 2)) is Tile.CLOSED_DOOR
    assert m.tile(Point(8, 5)) is Tile.CLOSED_DOOR
    # off-lattice opening and secret door untouched
    assert m.tile(Point(4, 6)) is Tile.FLOOR
    assert m.tile(Point(2, 3)) is Tile.SECRET_DOOR
    assert m.tile(Point(5, 1)) is Tile.FLOOR


def test_no_rooms_no_doors():
    m = Map.from_lines(LAYOUT)
    assert place_room_doors(m, []) == 0
    assert m.count(Tile.CLOSED_DOOR) == 0
