"""Seed resolution and per-call random streams.

Every generation call owns a private ``random.Random``; nothing in the
package touches the module-level ``random`` state.
"""

import logging
import random
from typing import Optional

from stellar_pcg.core.constants import RANDOM_SEED, RANDOM_SEED_MAX

logger = logging.getLogger(__name__)


def resolve_seed(seed: Optional[int], default: int = RANDOM_SEED) -> int:
    """
    Turn a requested seed into the concrete seed a generator will use.

    Args:
        seed: Requested seed. ``None`` falls back to ``default``;
            ``RANDOM_SEED`` (-1) draws a fresh one.
        default: Seed used when ``seed`` is None (usually the config's).

    Returns:
        A non-sentinel integer seed that reproduces the generation.
    """
    if seed is None:
        seed = default
    seed = int(seed)
    if seed == RANDOM_SEED:
        seed = random.SystemRandom().randrange(RANDOM_SEED_MAX)
        logger.debug("Drew fresh seed %d", seed)
    return seed


def make_rng(seed: int) -> random.Random:
    """Create an isolated random stream for one generation call."""
    return random.Random(seed)
