"""Room placement by bounded rejection sampling."""

import logging
import random
from typing import List, NamedTuple, Optional, Set

from stellar_pcg.core.constants import ROOM_BORDER_MARGIN, ROOM_PLACEMENT_ATTEMPTS
from stellar_pcg.core.geometry import Tile
from stellar_pcg.level.layout_data import LayoutConfig, Room

logger = logging.getLogger(__name__)


class RoomPlacement(NamedTuple):
    rooms: List[Room]
    requested: int


def place_rooms(config: LayoutConfig, rng: random.Random, floor: Set[Tile]) -> RoomPlacement:
    """
    Place non-overlapping rooms and carve their tiles into ``floor``.

    The target count is drawn from the configured range. Each room slot gets
    up to ROOM_PLACEMENT_ATTEMPTS candidates; a slot whose candidates all
    collide is skipped, so fewer rooms than requested may come back.

    Args:
        config: Layout configuration (level size, room ranges, spacing)
        rng: Random stream for this generation
        floor: Floor tile set, mutated in place

    Returns:
        RoomPlacement with the accepted rooms in placement order and the
        drawn target count
    """
    target = rng.randint(config.min_room_count, config.max_room_count)
    rooms: List[Room] = []

    for _ in range(target):
        room = _try_place_room(config, rng, rooms)
        if room is not None:
            rooms.append(room)
            floor.update(room.tiles())

    if len(rooms) < target:
        logger.warning("Could only place %d/%d rooms. Try a larger level or smaller rooms.",
                       len(rooms), target)
    else:
        logger.debug("Placed %d rooms", len(rooms))

    return RoomPlacement(rooms=rooms, requested=target)


def _try_place_room(config: LayoutConfig, rng: random.Random, rooms: List[Room]) -> Optional[Room]:
    """Sample candidates for one room slot; None if every attempt collides."""
    min_w, min_h = config.min_room_size
    max_w, max_h = config.max_room_size

    for _ in range(ROOM_PLACEMENT_ATTEMPTS):
        room_w = rng.randint(min_w, max_w)
        room_h = rng.randint(min_h, max_h)

        max_x = config.level_width - room_w - ROOM_BORDER_MARGIN
        max_y = config.level_height - room_h - ROOM_BORDER_MARGIN
        if max_x < ROOM_BORDER_MARGIN or max_y < ROOM_BORDER_MARGIN:
            continue  # Room too big for the level

        x = rng.randint(ROOM_BORDER_MARGIN, max_x)
        y = rng.randint(ROOM_BORDER_MARGIN, max_y)
        candidate = Room(x, y, room_w, room_h)

        if not any(candidate.overlaps(existing, config.room_spacing) for existing in rooms):
            return candidate

    return None
