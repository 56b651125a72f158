"""One-seed mission generation: a level layout plus its guard encounters."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from stellar_pcg.core.constants import PATROL_SEED_OFFSET, RANDOM_SEED
from stellar_pcg.core.rng import resolve_seed
from stellar_pcg.encounters.patrol_data import GuardEncounterSet, PatrolConfig
from stellar_pcg.encounters.patrol_generator import generate_encounters
from stellar_pcg.level.layout_data import LayoutConfig, LevelLayout
from stellar_pcg.level.layout_generator import generate_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissionData:
    seed: int
    layout: LevelLayout
    encounters: GuardEncounterSet

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "layout": self.layout.to_dict(),
            "encounters": self.encounters.to_dict(),
        }


def generate_mission(seed: Optional[int] = RANDOM_SEED,
                     layout_config: Optional[LayoutConfig] = None,
                     patrol_config: Optional[PatrolConfig] = None) -> MissionData:
    """
    Generate a layout and its guards from a single seed.

    The layout stream is seeded with ``seed`` and the guard stream with
    ``seed + PATROL_SEED_OFFSET``, so the two never share draws and each is
    reproducible on its own.
    """
    layout_config = layout_config if layout_config is not None else LayoutConfig()
    patrol_config = patrol_config if patrol_config is not None else PatrolConfig()
    seed = resolve_seed(seed, layout_config.random_seed)

    layout = generate_layout(layout_config, seed)
    encounters = generate_encounters(patrol_config, seed + PATROL_SEED_OFFSET)

    logger.info("Mission generated! Seed: %d, Rooms: %d/%d, Guards: %d/%d",
                seed, len(layout.rooms), layout.requested_room_count,
                len(encounters.guards), encounters.requested_count)
    return MissionData(seed=seed, layout=layout, encounters=encounters)
