from typing import AbstractSet, Set

from stellar_pcg.core.constants import NEIGHBORS_8
from stellar_pcg.core.geometry import Tile


def derive_walls(floor: AbstractSet[Tile], obstacles: AbstractSet[Tile]) -> Set[Tile]:
    """Return every 8-neighbor of a floor tile that is neither floor nor obstacle."""
    walls: Set[Tile] = set()
    for x, y in floor:
        for dx, dy in NEIGHBORS_8:
            neighbor = (x + dx, y + dy)
            if neighbor not in floor and neighbor not in obstacles:
                walls.add(neighbor)
    return walls
