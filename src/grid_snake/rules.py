"""Play-field bounds, food placement and difficulty scaling."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .config import (
    INITIAL_SPEED,
    MAP_HEIGHT,
    MAP_WIDTH,
    SPEED_STEPS,
    SQUARE,
    WINDOW_HEIGHT,
)
from .snake import Point, Snake


@dataclass(frozen=True, slots=True)
class Bounds:
    """Wall coordinates; a head on or past either wall has collided."""

    min_point: Point
    max_point: Point

    def __post_init__(self) -> None:
        if (
            self.min_point[0] >= self.max_point[0]
            or self.min_point[1] >= self.max_point[1]
        ):
            raise ValueError(
                f"min_point {self.min_point} must be above-left of "
                f"max_point {self.max_point}"
            )


# Walls hug the map, which sits below the two-row score strip.
DEFAULT_BOUNDS = Bounds(
    min_point=(SQUARE, WINDOW_HEIGHT - MAP_HEIGHT),
    max_point=(MAP_WIDTH - SQUARE, WINDOW_HEIGHT - SQUARE),
)


def gen_food(bounds: Bounds, rng: random.Random) -> Point:
    """Return a random grid cell strictly between the walls.

    Cells under the snake are not excluded.
    """
    min_x = bounds.min_point[0] // SQUARE + 1
    max_x = bounds.max_point[0] // SQUARE - 1
    min_y = bounds.min_point[1] // SQUARE + 1
    max_y = bounds.max_point[1] // SQUARE - 1
    if min_x > max_x or min_y > max_y:
        raise ValueError(f"no free cell between walls of {bounds}")
    return rng.randint(min_x, max_x) * SQUARE, rng.randint(min_y, max_y) * SQUARE


def tick_interval(count: int) -> float:
    """Seconds between moves for a snake that has eaten ``count`` food."""
    for threshold, interval in SPEED_STEPS:
        if count > threshold:
            return interval
    return INITIAL_SPEED


def increase_speed(snake: Snake, speed: float) -> float:
    """Return the new tick interval; it never grows back until restart."""
    return min(speed, tick_interval(snake.count))
