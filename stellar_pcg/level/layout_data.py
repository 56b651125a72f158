"""Level layout data structures.

Rooms, corridors, tile classification sets and special points produced by
the layout generator, plus the LayoutConfig that drives it. Everything
handed to callers is frozen; the generator builds into plain sets and
freezes them once at the end.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple, FrozenSet, Iterator

import pygame

from stellar_pcg.core.constants import RANDOM_SEED
from stellar_pcg.core.geometry import Tile


@dataclass
class LayoutConfig:
    """Configuration for procedural level layout generation."""
    level_width: int = 50
    level_height: int = 50

    # --- ROOMS ---
    # Target room count is drawn uniformly from [min_room_count, max_room_count].
    min_room_count: int = 4
    max_room_count: int = 8
    # (width, height) limits, both inclusive.
    min_room_size: Tuple[int, int] = (6, 6)
    max_room_size: Tuple[int, int] = (15, 15)
    # Rooms must be more than this many tiles apart on at least one axis.
    room_spacing: int = 3

    # --- CORRIDORS ---
    corridor_width: int = 2
    # When False every corridor goes horizontal-first and no coin is flipped.
    winding_corridors: bool = True

    # --- OBSTACLES ---
    # Chance (0.0 to 1.0) per floor tile to anchor an obstacle cluster.
    obstacle_chance: float = 0.15
    # Side length range of the square clusters.
    min_obstacle_size: int = 1
    max_obstacle_size: int = 3

    # --- COVER ---
    # Chance per remaining floor tile to be flagged as a cover point.
    cover_chance: float = 0.2

    # --- SPECIAL LOCATIONS ---
    generate_start_point: bool = True
    generate_extraction_point: bool = True
    generate_objective_points: bool = True
    objective_point_count: int = 3

    # -1 draws a fresh seed per generation.
    random_seed: int = RANDOM_SEED

    def validate(self) -> None:
        """Raise ValueError for configurations no layout can come from."""
        if self.level_width <= 0 or self.level_height <= 0:
            raise ValueError("LayoutConfig level size must be positive")
        if self.min_room_count < 0 or self.min_room_count > self.max_room_count:
            raise ValueError("LayoutConfig room count range is invalid: "
                             f"[{self.min_room_count}, {self.max_room_count}]")
        for axis in (0, 1):
            lo, hi = self.min_room_size[axis], self.max_room_size[axis]
            if lo <= 0 or lo > hi:
                raise ValueError(f"LayoutConfig room size range is invalid: {self.min_room_size} - {self.max_room_size}")
        if self.room_spacing < 0:
            raise ValueError("LayoutConfig.room_spacing must not be negative")
        if self.corridor_width <= 0:
            raise ValueError("LayoutConfig.corridor_width must be positive")
        if self.min_obstacle_size <= 0 or self.min_obstacle_size > self.max_obstacle_size:
            raise ValueError("LayoutConfig obstacle size range is invalid")
        for name in ("obstacle_chance", "cover_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"LayoutConfig.{name} must be within [0, 1], got {value}")
        if self.objective_point_count < 0:
            raise ValueError("LayoutConfig.objective_point_count must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level_width": self.level_width,
            "level_height": self.level_height,
            "min_room_count": self.min_room_count,
            "max_room_count": self.max_room_count,
            "min_room_size": list(self.min_room_size),
            "max_room_size": list(self.max_room_size),
            "room_spacing": self.room_spacing,
            "corridor_width": self.corridor_width,
            "winding_corridors": self.winding_corridors,
            "obstacle_chance": self.obstacle_chance,
            "min_obstacle_size": self.min_obstacle_size,
            "max_obstacle_size": self.max_obstacle_size,
            "cover_chance": self.cover_chance,
            "generate_start_point": self.generate_start_point,
            "generate_extraction_point": self.generate_extraction_point,
            "generate_objective_points": self.generate_objective_points,
            "objective_point_count": self.objective_point_count,
            "random_seed": self.random_seed,
        }


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangular room. Origin is the top-left tile."""
    x: int
    y: int
    width: int
    height: int

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tile:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def overlaps(self, other: "Room", spacing: int = 0) -> bool:
        """
        Check whether two rooms sit too close together.

        Rooms closer than ``spacing + 1`` tiles on both axes overlap, so an
        accepted pair always has a gap of more than ``spacing`` tiles on at
        least one axis.
        """
        pad = 2 * (spacing + 1)
        return self.rect.inflate(pad, pad).colliderect(other.rect)

    def tiles(self) -> Iterator[Tile]:
        for ty in range(self.y, self.y + self.height):
            for tx in range(self.x, self.x + self.width):
                yield (tx, ty)

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Corridor:
    """Endpoints of a carved corridor (room centers)."""
    start: Tile
    end: Tile


@dataclass(frozen=True)
class SpecialPoints:
    start: Optional[Tile] = None
    extraction: Optional[Tile] = None
    objectives: Tuple[Tile, ...] = ()


@dataclass(frozen=True)
class LevelLayout:
    """Complete generated level layout.

    ``floor``, ``wall`` and ``obstacle`` are pairwise disjoint. The
    ``seed`` field is the concrete seed used, so a layout generated with
    the random sentinel can be reproduced later.
    """
    seed: int
    width: int
    height: int
    requested_room_count: int
    rooms: Tuple[Room, ...] = ()
    corridors: Tuple[Corridor, ...] = ()
    floor: FrozenSet[Tile] = frozenset()
    wall: FrozenSet[Tile] = frozenset()
    obstacle: FrozenSet[Tile] = frozenset()
    special_points: SpecialPoints = field(default_factory=SpecialPoints)
    cover_points: Tuple[Tile, ...] = ()

    @property
    def room_shortfall(self) -> int:
        return max(0, self.requested_room_count - len(self.rooms))

    @property
    def is_empty(self) -> bool:
        return not self.rooms

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible dict. Tile sets are sorted for stable output."""
        sp = self.special_points
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "requested_room_count": self.requested_room_count,
            "rooms": [room.to_dict() for room in self.rooms],
            "corridors": [{"start": list(c.start), "end": list(c.end)} for c in self.corridors],
            "floor": _tile_list(self.floor),
            "wall": _tile_list(self.wall),
            "obstacle": _tile_list(self.obstacle),
            "special_points": {
                "start": list(sp.start) if sp.start is not None else None,
                "extraction": list(sp.extraction) if sp.extraction is not None else None,
                "objectives": [list(p) for p in sp.objectives],
            },
            "cover_points": [list(p) for p in self.cover_points],
        }


def _tile_list(tiles) -> List[List[int]]:
    return [list(t) for t in sorted(tiles)]
