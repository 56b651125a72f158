# stellar_pcg/core/constants.py
"""
Global constants for the generators.

Coordinate System:
- Tiles are addressed by integer (x, y) pairs with no fixed origin.
- Level layouts occupy [0, width) x [0, height); rooms keep a 2-tile border.
- Guard encounters use float coordinates inside a configurable bounds box.
"""

# === Seeding ===
# Passing this seed asks the generator to draw (and record) a fresh seed.
RANDOM_SEED = -1
# Fresh seeds are drawn from [0, RANDOM_SEED_MAX).
RANDOM_SEED_MAX = 999999
# The encounter stream of a mission is seeded with seed + this offset so the
# layout and the guards never share draws.
PATROL_SEED_OFFSET = 1000

# === Room placement ===
ROOM_PLACEMENT_ATTEMPTS = 50
ROOM_BORDER_MARGIN = 2

# === Corridors ===
# Extra loop edges are only added above this many rooms.
EXTRA_CORRIDOR_MIN_ROOMS = 3

# === Neighborhoods ===
NEIGHBORS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
NEIGHBORS_8 = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)

# === Guard spawns ===
SPAWN_ATTEMPTS_PER_GUARD = 20

# === Patrol routes ===
MIN_PATROL_STEP = 3.0

# === Vision ===
VISION_RANGE_MIN = 6.0
VISION_RANGE_MAX = 10.0
VISION_DIFFICULTY_SCALE = 0.2  # +20% range per difficulty step
VISION_ANGLE_MIN = 75.0
VISION_ANGLE_MAX = 120.0

# === Files ===
DEFAULT_CONFIG_PATH = "config/stellar_pcg.json"
