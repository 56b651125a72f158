import random
from dataclasses import dataclass
from typing import Tuple

import pygame

Point = Tuple[float, float]
Tile = Tuple[int, int]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned float rectangle, inclusive on every edge."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        x, y = point
        return (self.min_x - tolerance <= x <= self.max_x + tolerance and
                self.min_y - tolerance <= y <= self.max_y + tolerance)

    def clamp(self, point: Point) -> pygame.math.Vector2:
        x = min(max(point[0], self.min_x), self.max_x)
        y = min(max(point[1], self.min_y), self.max_y)
        return pygame.math.Vector2(x, y)

    def random_point(self, rng: random.Random) -> pygame.math.Vector2:
        """Uniform point inside the bounds. Draws x first, then y."""
        x = rng.uniform(self.min_x, self.max_x)
        y = rng.uniform(self.min_y, self.max_y)
        return pygame.math.Vector2(x, y)

    def to_dict(self):
        return {"min_x": self.min_x, "min_y": self.min_y,
                "max_x": self.max_x, "max_y": self.max_y}


def random_direction(rng: random.Random) -> pygame.math.Vector2:
    """Unit vector with a uniformly distributed heading."""
    return pygame.math.Vector2(1, 0).rotate(rng.uniform(0.0, 360.0))


def as_point(vec: pygame.math.Vector2) -> Point:
    return (float(vec.x), float(vec.y))
