"""The snake entity: movement, growth and collision rules."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from .config import SQUARE

Point = tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def step(self) -> Point:
        """Unit vector for one move in this direction."""
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        return other is self.opposite


@dataclass(slots=True)
class Snake:
    """Head plus a trail of former head positions, newest first.

    ``body`` only ever grows at the front (``move_to``) and shrinks from the
    back (``has_eaten_food``), so a deque keeps both ends O(1).
    """

    head: Point
    body: deque[Point] = field(default_factory=deque)
    direction: Direction = Direction.LEFT
    count: int = 0

    def turn(self, direction: Direction) -> bool:
        """Point the snake in ``direction`` unless that would reverse it."""
        if self.direction.is_opposite(direction):
            return False
        self.direction = direction
        return True

    def move_to(self) -> None:
        """Push the head one cell forward; the old head joins the body."""
        dx, dy = self.direction.step
        self.body.appendleft(self.head)
        self.head = (self.head[0] + dx * SQUARE, self.head[1] + dy * SQUARE)

    def has_eaten_food(self, food: Point) -> bool:
        """Grow when the head is on ``food``; otherwise trim the tail to ``count``."""
        if self.head == food:
            self.count += 1
            return True
        while len(self.body) > self.count:
            self.body.pop()
        return False

    def is_collision(self, min_point: Point, max_point: Point) -> bool:
        x, y = self.head
        if x <= min_point[0] or x >= max_point[0]:
            return True
        if y <= min_point[1] or y >= max_point[1]:
            return True
        return self.head in self.body
