"""
Seed-based level layout generator.
Generates deterministic layouts with rooms, corridors, obstacles, walls and
special locations for the stealth missions.
"""

import logging
from typing import Optional, Set

from stellar_pcg.core.geometry import Tile
from stellar_pcg.core.rng import make_rng, resolve_seed
from stellar_pcg.level.corridor_connector import connect_rooms
from stellar_pcg.level.cover_placer import place_cover_points
from stellar_pcg.level.layout_data import LayoutConfig, LevelLayout
from stellar_pcg.level.obstacle_carver import carve_obstacles
from stellar_pcg.level.room_placer import place_rooms
from stellar_pcg.level.special_locations import place_special_locations
from stellar_pcg.level.wall_deriver import derive_walls

logger = logging.getLogger(__name__)


def generate_layout(config: LayoutConfig, seed: int) -> LevelLayout:
    """
    Generate a layout from a concrete seed.

    Phase order is fixed (rooms, corridors, obstacles, walls, special
    points, cover points); changing it changes every later draw.

    Args:
        config: Layout configuration
        seed: Concrete seed (the -1 sentinel is not resolved here)

    Returns:
        Frozen LevelLayout
    """
    rng = make_rng(seed)
    floor: Set[Tile] = set()
    obstacles: Set[Tile] = set()

    # Step 1: Place rooms
    placement = place_rooms(config, rng, floor)
    rooms = placement.rooms

    # Step 2: Connect rooms with corridors
    corridors = connect_rooms(rooms, config, rng, floor)

    # Step 3: Carve obstacles out of the floor
    carve_obstacles(floor, obstacles, config, rng)

    # Step 4: Derive boundary walls
    walls = derive_walls(floor, obstacles)

    # Step 5: Special locations
    special_points = place_special_locations(rooms, config)

    # Step 6: Cover points on the remaining floor
    cover_points = place_cover_points(floor, config.cover_chance, rng)

    return LevelLayout(
        seed=seed,
        width=config.level_width,
        height=config.level_height,
        requested_room_count=placement.requested,
        rooms=tuple(rooms),
        corridors=tuple(corridors),
        floor=frozenset(floor),
        wall=frozenset(walls),
        obstacle=frozenset(obstacles),
        special_points=special_points,
        cover_points=tuple(cover_points),
    )


class LevelLayoutGenerator:
    """Generation service holding the most recent layout.

    Not tied to any presentation layer; call ``generate`` from a CLI, a test
    or a game bootstrap.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config if config is not None else LayoutConfig()
        self._layout: Optional[LevelLayout] = None

    @property
    def layout(self) -> Optional[LevelLayout]:
        return self._layout

    def clear(self) -> None:
        self._layout = None

    def generate(self, seed: Optional[int] = None) -> LevelLayout:
        """
        Generate a fresh layout, replacing any previous one.

        Args:
            seed: Seed to use. None uses config.random_seed; -1 draws a
                fresh seed which is recorded on the result.
        """
        seed = resolve_seed(seed, self.config.random_seed)
        self.clear()

        layout = generate_layout(self.config, seed)
        self._layout = layout

        logger.info("Level generated! Seed: %d, Rooms: %d, Corridors: %d, Floor tiles: %d",
                    layout.seed, len(layout.rooms), len(layout.corridors), len(layout.floor))
        return layout
