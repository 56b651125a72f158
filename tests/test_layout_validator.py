from stellar_pcg.level.layout_data import LayoutConfig, LevelLayout, Room, SpecialPoints
from stellar_pcg.level.layout_generator import generate_layout
from stellar_pcg.level.layout_validator import flood_fill_floor, validate_layout
from stellar_pcg.level.wall_deriver import derive_walls


def _layout_from_rooms(rooms, extra_floor=()):
    floor = set(extra_floor)
    for room in rooms:
        floor.update(room.tiles())
    return LevelLayout(
        seed=0, width=40, height=20, requested_room_count=len(rooms),
        rooms=tuple(rooms),
        floor=frozenset(floor),
        wall=frozenset(derive_walls(floor, set())),
        special_points=SpecialPoints(start=rooms[0].center, extraction=rooms[-1].center),
    )


def test_obstacle_free_layout_is_viable():
    config = LayoutConfig(obstacle_chance=0.0)
    for seed in range(10):
        layout = generate_layout(config, seed)
        result = validate_layout(layout)
        assert result.is_valid, result.message
        assert len(result.reachable_rooms) == len(layout.rooms)


def test_zero_room_layout_is_rejected():
    layout = LevelLayout(seed=0, width=8, height=8, requested_room_count=4)
    result = validate_layout(layout)
    assert not result.is_valid
    assert "Layout has no rooms" in result.issues


def test_disconnected_rooms_are_reported():
    rooms = [Room(2, 2, 5, 5), Room(20, 2, 5, 5)]
    result = validate_layout(_layout_from_rooms(rooms))
    assert not result.is_valid
    assert "Extraction point is not reachable from start" in result.issues
    assert result.reachable_rooms == [rooms[0]]


def test_connected_rooms_pass():
    rooms = [Room(2, 2, 5, 5), Room(20, 2, 5, 5)]
    bridge = [(x, 4) for x in range(7, 20)]
    result = validate_layout(_layout_from_rooms(rooms, bridge))
    assert result.is_valid
    assert result.message == "Layout is viable"


def test_overlapping_tile_sets_are_reported():
    rooms = [Room(2, 2, 5, 5)]
    layout = _layout_from_rooms(rooms)
    broken = LevelLayout(
        seed=0, width=40, height=20, requested_room_count=1,
        rooms=layout.rooms, floor=layout.floor, wall=layout.wall,
        obstacle=frozenset({(3, 3)}),
        special_points=layout.special_points,
    )
    result = validate_layout(broken)
    assert "Floor and obstacle tiles overlap" in result.issues


def test_start_on_obstacle_is_reported():
    room = Room(2, 2, 5, 5)
    floor = set(room.tiles()) - {room.center}
    layout = LevelLayout(
        seed=0, width=20, height=20, requested_room_count=1,
        rooms=(room,), floor=frozenset(floor),
        wall=frozenset(derive_walls(floor, {room.center})),
        obstacle=frozenset({room.center}),
        special_points=SpecialPoints(start=room.center, extraction=room.center),
    )
    result = validate_layout(layout)
    assert not result.is_valid
    assert any("Start point" in issue for issue in result.issues)


def test_flood_fill_ignores_diagonals():
    floor = {(0, 0), (1, 1)}
    assert flood_fill_floor(floor, (0, 0)) == {(0, 0)}
    assert flood_fill_floor(floor, (5, 5)) == set()
