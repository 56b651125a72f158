"""Guard encounter data structures and PatrolConfig."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from stellar_pcg.core.constants import RANDOM_SEED
from stellar_pcg.core.geometry import Bounds, Point


class PatrolType(Enum):
    STATIONARY = 0
    LOOP = 1        # A -> B -> C -> A
    PING_PONG = 2   # A -> B -> C -> B -> A
    RANDOM = 3      # Random waypoint each time


# Types a patrolling guard can be tagged with.
MOVING_PATROL_TYPES = (PatrolType.LOOP, PatrolType.PING_PONG, PatrolType.RANDOM)


@dataclass
class PatrolConfig:
    """Configuration for guard spawn and patrol route generation."""
    guard_count: int = 8
    # Minimum Euclidean distance between two guard spawns.
    min_guard_spacing: float = 5.0
    # Area for spawns and waypoints (inclusive).
    spawn_bounds: Bounds = field(default_factory=lambda: Bounds(-10.0, -10.0, 10.0, 10.0))

    # --- PATROLS ---
    # Chance (0.0 to 1.0) that a guard patrols instead of standing still.
    patrol_percentage: float = 0.7
    # Waypoint count range for patrolling guards, spawn point included.
    # At least 2; a single waypoint is reserved for stationary guards.
    min_waypoints: int = 2
    max_waypoints: int = 5
    # Upper bound of a single waypoint-to-waypoint step.
    max_patrol_distance: float = 15.0

    # --- DIFFICULTY ---
    # 1=Easy, 2=Normal, 3=Hard. Scales guard count and vision range.
    scale_with_difficulty: bool = True
    difficulty_multiplier: int = 1

    random_seed: int = RANDOM_SEED

    @property
    def effective_guard_count(self) -> int:
        if self.scale_with_difficulty:
            return self.guard_count * self.difficulty_multiplier
        return self.guard_count

    def validate(self) -> None:
        """Raise ValueError for configurations no encounter set can come from."""
        if self.guard_count < 0:
            raise ValueError("PatrolConfig.guard_count must not be negative")
        if self.min_guard_spacing < 0:
            raise ValueError("PatrolConfig.min_guard_spacing must not be negative")
        b = self.spawn_bounds
        if b.min_x > b.max_x or b.min_y > b.max_y:
            raise ValueError(f"PatrolConfig.spawn_bounds is inverted: {b}")
        if not 0.0 <= self.patrol_percentage <= 1.0:
            raise ValueError(f"PatrolConfig.patrol_percentage must be within [0, 1], got {self.patrol_percentage}")
        if self.min_waypoints < 2 or self.min_waypoints > self.max_waypoints:
            raise ValueError("PatrolConfig waypoint range must start at 2 or more and not be inverted: "
                             f"[{self.min_waypoints}, {self.max_waypoints}]")
        if self.max_patrol_distance < 3.0:
            raise ValueError("PatrolConfig.max_patrol_distance must be at least 3")
        if self.difficulty_multiplier < 1:
            raise ValueError("PatrolConfig.difficulty_multiplier must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guard_count": self.guard_count,
            "min_guard_spacing": self.min_guard_spacing,
            "spawn_bounds": self.spawn_bounds.to_dict(),
            "patrol_percentage": self.patrol_percentage,
            "min_waypoints": self.min_waypoints,
            "max_waypoints": self.max_waypoints,
            "max_patrol_distance": self.max_patrol_distance,
            "scale_with_difficulty": self.scale_with_difficulty,
            "difficulty_multiplier": self.difficulty_multiplier,
            "random_seed": self.random_seed,
        }


@dataclass(frozen=True)
class GuardPatrolRecord:
    """
    Spawn, route and vision parameters for one guard.

    Attributes:
        guard_id: Identifier such as "Guard_000"
        spawn_position: Spawn point, also the first waypoint
        is_patrolling: False for stationary guards
        waypoints: Route points; exactly one for stationary guards
        patrol_type: How the guard behavior should walk the route
        initial_facing: Unit vector the guard starts facing
        vision_range: Detection distance
        vision_angle: Full cone angle in degrees
    """
    guard_id: str
    spawn_position: Point
    is_patrolling: bool
    waypoints: Tuple[Point, ...]
    patrol_type: PatrolType
    initial_facing: Point
    vision_range: float
    vision_angle: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guard_id": self.guard_id,
            "spawn_position": list(self.spawn_position),
            "is_patrolling": self.is_patrolling,
            "waypoints": [list(p) for p in self.waypoints],
            "patrol_type": self.patrol_type.name,
            "initial_facing": list(self.initial_facing),
            "vision_range": self.vision_range,
            "vision_angle": self.vision_angle,
        }


@dataclass(frozen=True)
class GuardEncounterSet:
    """All guards generated by one call."""
    seed: int
    requested_count: int
    bounds: Bounds
    guards: Tuple[GuardPatrolRecord, ...] = ()

    @property
    def shortfall(self) -> int:
        return max(0, self.requested_count - len(self.guards))

    @property
    def patrolling_count(self) -> int:
        return sum(1 for g in self.guards if g.is_patrolling)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "requested_count": self.requested_count,
            "bounds": self.bounds.to_dict(),
            "guards": [g.to_dict() for g in self.guards],
        }
