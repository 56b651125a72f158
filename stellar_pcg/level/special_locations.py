"""Start, extraction and objective points picked from room centers."""

from typing import List

from stellar_pcg.core.geometry import Tile
from stellar_pcg.level.layout_data import LayoutConfig, Room, SpecialPoints

ORIGIN: Tile = (0, 0)


def place_special_locations(rooms: List[Room], config: LayoutConfig) -> SpecialPoints:
    """
    Pick special points from room centers. Consumes no randomness.

    - start: center of the first room
    - extraction: center of the last room
    - objectives[i]: center of room min(i + 1, last), so once rooms run out
      the last room's center repeats and may coincide with extraction

    With no rooms, start and extraction fall back to the origin and there
    are no objectives; callers must reject such a layout themselves.
    """
    if not rooms:
        return SpecialPoints(
            start=ORIGIN if config.generate_start_point else None,
            extraction=ORIGIN if config.generate_extraction_point else None,
            objectives=(),
        )

    last_index = len(rooms) - 1
    start = rooms[0].center if config.generate_start_point else None
    extraction = rooms[last_index].center if config.generate_extraction_point else None

    objectives: List[Tile] = []
    if config.generate_objective_points:
        for i in range(config.objective_point_count):
            objectives.append(rooms[min(i + 1, last_index)].center)

    return SpecialPoints(start=start, extraction=extraction, objectives=tuple(objectives))
