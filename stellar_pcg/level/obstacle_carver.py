import logging
import random
from typing import Set

from stellar_pcg.core.geometry import Tile
from stellar_pcg.level.layout_data import LayoutConfig

logger = logging.getLogger(__name__)


def carve_obstacles(floor: Set[Tile], obstacles: Set[Tile], config: LayoutConfig,
                    rng: random.Random) -> None:
    """
    Move random square clusters of floor tiles into the obstacle set.

    Iterates a sorted snapshot of ``floor`` taken before any carving, so the
    visited tiles never depend on what earlier clusters removed. Cluster
    tiles that already left the floor are skipped.
    """
    snapshot = sorted(floor)

    for tx, ty in snapshot:
        if rng.random() < config.obstacle_chance:
            size = rng.randint(config.min_obstacle_size, config.max_obstacle_size)
            for dx in range(size):
                for dy in range(size):
                    pos = (tx + dx, ty + dy)
                    if pos in floor:
                        floor.discard(pos)
                        obstacles.add(pos)

    logger.debug("Carved %d obstacle tiles out of %d floor tiles", len(obstacles), len(snapshot))
