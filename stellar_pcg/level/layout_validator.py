"""
Layout Validator - caller-side viability checks for generated layouts.

The generator is best-effort and never rejects its own output. Callers use
this module to decide whether a layout is playable (rooms present, tile sets
consistent, extraction reachable from start) before spawning anything.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import AbstractSet, List, Set

from stellar_pcg.core.constants import NEIGHBORS_4, NEIGHBORS_8
from stellar_pcg.core.geometry import Tile
from stellar_pcg.level.layout_data import LevelLayout, Room


@dataclass
class ValidationResult:
    """Result of layout validation."""
    is_valid: bool
    issues: List[str] = field(default_factory=list)
    reachable_rooms: List[Room] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.is_valid:
            return "Layout is viable"
        return "; ".join(self.issues)


def validate_layout(layout: LevelLayout) -> ValidationResult:
    """
    Check a layout for playability.

    Args:
        layout: Layout to inspect (never modified)

    Returns:
        ValidationResult listing every issue found
    """
    issues: List[str] = []

    if not layout.rooms:
        issues.append("Layout has no rooms")

    if layout.floor & layout.obstacle:
        issues.append("Floor and obstacle tiles overlap")
    if layout.floor & layout.wall:
        issues.append("Floor and wall tiles overlap")
    if layout.obstacle & layout.wall:
        issues.append("Obstacle and wall tiles overlap")

    orphan_walls = [w for w in layout.wall if not _has_floor_neighbor(w, layout.floor)]
    if orphan_walls:
        issues.append(f"{len(orphan_walls)} wall tiles have no floor neighbor")

    reachable_rooms: List[Room] = []
    start = layout.special_points.start
    extraction = layout.special_points.extraction
    if layout.rooms and start is not None:
        if start not in layout.floor:
            issues.append(f"Start point {start} is not on floor")
        else:
            visited = flood_fill_floor(layout.floor, start)
            reachable_rooms = [room for room in layout.rooms
                               if any(tile in visited for tile in room.tiles())]
            if extraction is not None:
                if extraction not in layout.floor:
                    issues.append(f"Extraction point {extraction} is not on floor")
                elif extraction not in visited:
                    issues.append("Extraction point is not reachable from start")

    return ValidationResult(is_valid=not issues, issues=issues, reachable_rooms=reachable_rooms)


def flood_fill_floor(floor: AbstractSet[Tile], start: Tile) -> Set[Tile]:
    """Find all floor tiles 4-connected to ``start``."""
    if start not in floor:
        return set()

    visited = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBORS_4:
            neighbor = (x + dx, y + dy)
            if neighbor in floor and neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def _has_floor_neighbor(tile: Tile, floor: AbstractSet[Tile]) -> bool:
    x, y = tile
    return any((x + dx, y + dy) in floor for dx, dy in NEIGHBORS_8)
