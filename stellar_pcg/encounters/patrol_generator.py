"""
Seed-based guard patrol generator.
Places spaced guard spawns and gives each a patrol route and vision cone.
"""

import logging
from typing import Optional

from stellar_pcg.core.rng import make_rng, resolve_seed
from stellar_pcg.encounters.patrol_data import GuardEncounterSet, PatrolConfig
from stellar_pcg.encounters.route_synthesizer import synthesize_routes
from stellar_pcg.encounters.spawn_placer import place_spawns

logger = logging.getLogger(__name__)


def generate_encounters(config: PatrolConfig, seed: int) -> GuardEncounterSet:
    """Generate guards from a concrete seed: spawns first, then routes."""
    rng = make_rng(seed)
    count = config.effective_guard_count

    placement = place_spawns(config.spawn_bounds, count, config.min_guard_spacing, rng)
    guards = synthesize_routes(placement.positions, config, rng)

    return GuardEncounterSet(
        seed=seed,
        requested_count=count,
        bounds=config.spawn_bounds,
        guards=tuple(guards),
    )


class GuardPatrolGenerator:
    """Generation service holding the most recent encounter set."""

    def __init__(self, config: Optional[PatrolConfig] = None):
        self.config = config if config is not None else PatrolConfig()
        self._encounters: Optional[GuardEncounterSet] = None

    @property
    def encounters(self) -> Optional[GuardEncounterSet]:
        return self._encounters

    def clear(self) -> None:
        self._encounters = None

    def generate(self, seed: Optional[int] = None) -> GuardEncounterSet:
        """Generate a fresh encounter set, replacing any previous one."""
        seed = resolve_seed(seed, self.config.random_seed)
        self.clear()

        encounters = generate_encounters(self.config, seed)
        self._encounters = encounters

        share = round(self.config.patrol_percentage * 100)
        logger.info("Generated %d guard patrols (%d%% patrolling, %d actually patrol). Seed: %d",
                    len(encounters.guards), share, encounters.patrolling_count, seed)
        return encounters
