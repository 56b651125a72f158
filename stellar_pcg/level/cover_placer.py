import random
from typing import AbstractSet, List

from stellar_pcg.core.geometry import Tile


def place_cover_points(floor: AbstractSet[Tile], cover_chance: float,
                       rng: random.Random) -> List[Tile]:
    """Flag floor tiles where an external spawner may put cover props.

    One draw per floor tile in sorted order, even when cover_chance is 0.
    """
    return [tile for tile in sorted(floor) if rng.random() < cover_chance]
