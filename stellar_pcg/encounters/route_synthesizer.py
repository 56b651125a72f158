"""
Patrol route synthesis.

Turns spawn points into GuardPatrolRecords: decides who patrols, walks a
bounded random route for patrolling guards and rolls vision parameters.
Single pass, no state; the patrol type tag is metadata for the guard
behavior that walks the route at runtime.
"""

import random
from typing import List, Sequence

import pygame

from stellar_pcg.core.constants import (
    MIN_PATROL_STEP,
    VISION_ANGLE_MAX,
    VISION_ANGLE_MIN,
    VISION_DIFFICULTY_SCALE,
    VISION_RANGE_MAX,
    VISION_RANGE_MIN,
)
from stellar_pcg.core.geometry import Bounds, as_point, random_direction
from stellar_pcg.encounters.patrol_data import (
    MOVING_PATROL_TYPES,
    GuardPatrolRecord,
    PatrolConfig,
    PatrolType,
)


def guard_id_for(index: int) -> str:
    return f"Guard_{index:03d}"


def synthesize_routes(spawns: Sequence[pygame.math.Vector2], config: PatrolConfig,
                      rng: random.Random) -> List[GuardPatrolRecord]:
    """
    Build one GuardPatrolRecord per spawn, in spawn order.

    Draw order per guard: patrol roll, route (waypoint count, then angle and
    distance per step), patrol type, facing, vision range, vision angle.
    """
    records: List[GuardPatrolRecord] = []

    for i, spawn in enumerate(spawns):
        should_patrol = rng.random() < config.patrol_percentage

        if should_patrol:
            waypoints = generate_patrol_route(spawn, config, rng)
            patrol_type = rng.choice(MOVING_PATROL_TYPES)
        else:
            waypoints = [pygame.math.Vector2(spawn)]
            patrol_type = PatrolType.STATIONARY

        facing = random_direction(rng)
        vision_range = rng.uniform(VISION_RANGE_MIN, VISION_RANGE_MAX) * vision_range_scale(
            config.difficulty_multiplier)
        vision_angle = rng.uniform(VISION_ANGLE_MIN, VISION_ANGLE_MAX)

        records.append(GuardPatrolRecord(
            guard_id=guard_id_for(i),
            spawn_position=as_point(spawn),
            is_patrolling=should_patrol,
            waypoints=tuple(as_point(w) for w in waypoints),
            patrol_type=patrol_type,
            initial_facing=as_point(facing),
            vision_range=vision_range,
            vision_angle=vision_angle,
        ))

    return records


def generate_patrol_route(start: pygame.math.Vector2, config: PatrolConfig,
                          rng: random.Random) -> List[pygame.math.Vector2]:
    """
    Random walk of waypoints starting at ``start``.

    Each step goes in a uniform direction for MIN_PATROL_STEP to
    max_patrol_distance units and is clamped into the spawn bounds; the next
    step starts from the clamped point.
    """
    bounds: Bounds = config.spawn_bounds
    waypoints = [pygame.math.Vector2(start)]

    waypoint_count = rng.randint(config.min_waypoints, config.max_waypoints)
    current = pygame.math.Vector2(start)

    for _ in range(1, waypoint_count):
        direction = random_direction(rng)
        distance = rng.uniform(MIN_PATROL_STEP, config.max_patrol_distance)
        next_pos = bounds.clamp(current + direction * distance)

        waypoints.append(next_pos)
        current = next_pos

    return waypoints


def vision_range_scale(difficulty_multiplier: int) -> float:
    return 1.0 + difficulty_multiplier * VISION_DIFFICULTY_SCALE
