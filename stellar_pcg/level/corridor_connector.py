"""Corridor carving between room centers.

Rooms are chained in placement order, which keeps the floor connected by
induction, and a few extra random edges add loops. Corridors are L-shaped
and thickened to the configured width.
"""

import logging
import random
from typing import List, Set

from stellar_pcg.core.constants import EXTRA_CORRIDOR_MIN_ROOMS
from stellar_pcg.core.geometry import Tile
from stellar_pcg.level.layout_data import Corridor, LayoutConfig, Room

logger = logging.getLogger(__name__)


def connect_rooms(rooms: List[Room], config: LayoutConfig, rng: random.Random,
                  floor: Set[Tile]) -> List[Corridor]:
    """Connect all rooms with corridors and return the carved corridors."""
    corridors: List[Corridor] = []

    for i in range(len(rooms) - 1):
        room_a = rooms[i]
        room_b = rooms[i + 1]
        corridors.append(carve_corridor(floor, room_a.center, room_b.center, config, rng))

    # Add some extra connections for loops
    if len(rooms) > EXTRA_CORRIDOR_MIN_ROOMS:
        extra_connections = rng.randrange(1, max(2, len(rooms) // 3))
        for _ in range(extra_connections):
            room_a = rooms[rng.randrange(len(rooms))]
            room_b = rooms[rng.randrange(len(rooms))]
            if room_a != room_b:
                corridors.append(carve_corridor(floor, room_a.center, room_b.center, config, rng))

    logger.debug("Carved %d corridors for %d rooms", len(corridors), len(rooms))
    return corridors


def carve_corridor(floor: Set[Tile], start: Tile, end: Tile, config: LayoutConfig,
                   rng: random.Random) -> Corridor:
    """Carve an L-shaped corridor between two points."""
    x1, y1 = start
    x2, y2 = end
    width = config.corridor_width

    if config.winding_corridors and rng.random() > 0.5:
        # Vertical then horizontal
        carve_vertical(floor, x1, y1, y2, width)
        carve_horizontal(floor, x1, x2, y2, width)
    else:
        # Horizontal then vertical
        carve_horizontal(floor, x1, x2, y1, width)
        carve_vertical(floor, x2, y1, y2, width)

    return Corridor(start=start, end=end)


def carve_horizontal(floor: Set[Tile], x1: int, x2: int, y: int, width: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        for offset in range(width):
            floor.add((x, y + offset - width // 2))


def carve_vertical(floor: Set[Tile], x: int, y1: int, y2: int, width: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        for offset in range(width):
            floor.add((x + offset - width // 2, y))
