import math
import random

import pygame
import pytest

from stellar_pcg.core.geometry import Bounds
from stellar_pcg.encounters.patrol_data import MOVING_PATROL_TYPES, PatrolConfig, PatrolType
from stellar_pcg.encounters.route_synthesizer import (
    generate_patrol_route,
    guard_id_for,
    synthesize_routes,
)

EPS = 1e-9

# --- Fixtures ---

@pytest.fixture
def spawns():
    return [pygame.math.Vector2(x, y) for x, y in ((-8, -8), (0, 0), (7, -3), (9.5, 9.5), (-9, 6))]


@pytest.fixture
def always_patrol():
    return PatrolConfig(patrol_percentage=1.0)


@pytest.fixture
def never_patrol():
    return PatrolConfig(patrol_percentage=0.0)

# --- Patrol vs stationary ---

def test_patrolling_guards_get_multi_point_routes(spawns, always_patrol):
    records = synthesize_routes(spawns, always_patrol, random.Random(2))
    assert len(records) == len(spawns)
    for record, spawn in zip(records, spawns):
        assert record.is_patrolling
        assert 2 <= len(record.waypoints) <= 5
        assert record.waypoints[0] == (spawn.x, spawn.y)
        assert record.patrol_type in MOVING_PATROL_TYPES


def test_stationary_guards_hold_their_spawn(spawns, never_patrol):
    records = synthesize_routes(spawns, never_patrol, random.Random(2))
    for record, spawn in zip(records, spawns):
        assert not record.is_patrolling
        assert record.waypoints == ((spawn.x, spawn.y),)
        assert record.patrol_type is PatrolType.STATIONARY


def test_guard_ids_are_sequential(spawns, always_patrol):
    records = synthesize_routes(spawns, always_patrol, random.Random(0))
    assert [r.guard_id for r in records] == [guard_id_for(i) for i in range(len(spawns))]
    assert records[0].guard_id == "Guard_000"

# --- Route geometry ---

def test_waypoints_stay_in_bounds(spawns, always_patrol):
    bounds = always_patrol.spawn_bounds
    for seed in range(20):
        for record in synthesize_routes(spawns, always_patrol, random.Random(seed)):
            for point in record.waypoints:
                assert bounds.contains(point, tolerance=EPS)


def test_steps_never_exceed_max_distance():
    config = PatrolConfig(max_patrol_distance=6.0, min_waypoints=5, max_waypoints=5)
    for seed in range(20):
        route = generate_patrol_route(pygame.math.Vector2(0, 0), config, random.Random(seed))
        assert len(route) == 5
        for a, b in zip(route, route[1:]):
            # Clamping only ever shortens a step
            assert a.distance_to(b) <= 6.0 + EPS


def test_unclamped_steps_are_at_least_min_step():
    # Bounds large enough that nothing gets clamped
    config = PatrolConfig(spawn_bounds=Bounds(-1000, -1000, 1000, 1000),
                          max_patrol_distance=10.0, min_waypoints=4, max_waypoints=4)
    route = generate_patrol_route(pygame.math.Vector2(0, 0), config, random.Random(5))
    for a, b in zip(route, route[1:]):
        assert 3.0 - EPS <= a.distance_to(b) <= 10.0 + EPS


def test_route_in_corner_is_clamped():
    config = PatrolConfig(spawn_bounds=Bounds(0, 0, 1, 1), min_waypoints=3, max_waypoints=3)
    route = generate_patrol_route(pygame.math.Vector2(0.5, 0.5), config, random.Random(1))
    for point in route:
        assert 0.0 <= point.x <= 1.0
        assert 0.0 <= point.y <= 1.0

# --- Vision ---

def test_facing_is_unit_vector(spawns, always_patrol):
    for record in synthesize_routes(spawns, always_patrol, random.Random(8)):
        fx, fy = record.initial_facing
        assert math.hypot(fx, fy) == pytest.approx(1.0)


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_vision_scales_with_difficulty(spawns, difficulty):
    config = PatrolConfig(difficulty_multiplier=difficulty)
    scale = 1.0 + difficulty * 0.2
    for record in synthesize_routes(spawns, config, random.Random(difficulty)):
        assert 6.0 * scale - EPS <= record.vision_range <= 10.0 * scale + EPS
        assert 75.0 <= record.vision_angle <= 120.0


def test_patrol_type_does_not_change_route(spawns, always_patrol):
    # The type is drawn after the route, so routes only depend on earlier draws
    records = synthesize_routes(spawns[:1], always_patrol, random.Random(12))
    rng = random.Random(12)
    rng.random()  # patrol roll
    route = generate_patrol_route(spawns[0], always_patrol, rng)
    assert records[0].waypoints == tuple((p.x, p.y) for p in route)
