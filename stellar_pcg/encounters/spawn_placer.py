"""Guard spawn placement with minimum spacing (rejection sampling)."""

import logging
import random
from dataclasses import dataclass, field
from typing import List

import pygame

from stellar_pcg.core.constants import SPAWN_ATTEMPTS_PER_GUARD
from stellar_pcg.core.geometry import Bounds

logger = logging.getLogger(__name__)


@dataclass
class SpawnPlacement:
    positions: List[pygame.math.Vector2] = field(default_factory=list)
    requested: int = 0
    attempts: int = 0

    @property
    def shortfall(self) -> int:
        return max(0, self.requested - len(self.positions))


def place_spawns(bounds: Bounds, count: int, min_spacing: float,
                 rng: random.Random) -> SpawnPlacement:
    """
    Draw spawn points inside ``bounds`` that are at least ``min_spacing`` apart.

    Attempts are capped at ``count * SPAWN_ATTEMPTS_PER_GUARD``. Hitting the
    cap returns the partial list and logs a warning instead of raising.

    Args:
        bounds: Spawn area (inclusive)
        count: Number of spawns wanted
        min_spacing: Minimum distance between any two spawns
        rng: Random stream for this generation

    Returns:
        SpawnPlacement with accepted positions in acceptance order
    """
    placement = SpawnPlacement(requested=count)
    max_attempts = count * SPAWN_ATTEMPTS_PER_GUARD

    while len(placement.positions) < count and placement.attempts < max_attempts:
        placement.attempts += 1
        candidate = bounds.random_point(rng)

        if all(candidate.distance_to(existing) >= min_spacing for existing in placement.positions):
            placement.positions.append(candidate)

    if placement.shortfall:
        logger.warning("Could only generate %d/%d positions. "
                       "Try increasing spawn bounds or reducing min spacing.",
                       len(placement.positions), count)

    return placement
