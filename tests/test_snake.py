# tests/test_snake.py
from collections import deque

import pytest

from grid_snake.snake import Direction, Snake

MIN = (10, 20)
MAX = (790, 610)


@pytest.mark.parametrize("current", list(Direction))
@pytest.mark.parametrize("wanted", list(Direction))
def test_turn_rejects_only_reversal(current, wanted):
    snake = Snake((400, 300), direction=current)
    accepted = snake.turn(wanted)
    if wanted is current.opposite:
        assert not accepted
        assert snake.direction is current
    else:
        assert accepted
        assert snake.direction is wanted


def test_opposites_pair_up():
    assert Direction.UP.is_opposite(Direction.DOWN)
    assert Direction.LEFT.is_opposite(Direction.RIGHT)
    assert not Direction.UP.is_opposite(Direction.LEFT)
    assert not Direction.RIGHT.is_opposite(Direction.RIGHT)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (400, 290)),
        (Direction.DOWN, (400, 310)),
        (Direction.LEFT, (390, 300)),
        (Direction.RIGHT, (410, 300)),
    ],
)
def test_move_to_advances_one_cell(direction, expected):
    snake = Snake((400, 300), direction=direction)
    snake.move_to()
    assert snake.head == expected
    assert snake.body[0] == (400, 300)


def test_missed_food_truncates_tail_to_count():
    body = deque([(410, 300), (420, 300), (430, 300), (440, 300)])
    snake = Snake((400, 300), body=body, count=2)
    snake.move_to()
    assert not snake.has_eaten_food((100, 100))
    # Newest segments survive; the distal ones are dropped.
    assert list(snake.body) == [(400, 300), (410, 300)]


def test_eating_grows_without_truncation():
    snake = Snake((400, 300), body=deque([(410, 300)]), count=1)
    snake.move_to()
    assert snake.has_eaten_food((390, 300))
    assert snake.count == 2
    assert list(snake.body) == [(400, 300), (410, 300)]


def test_body_stays_empty_before_first_food():
    snake = Snake((400, 300))
    for _ in range(3):
        snake.move_to()
        snake.has_eaten_food((100, 100))
        assert len(snake.body) == 0


@pytest.mark.parametrize(
    "head, hit",
    [
        ((400, 300), False),
        ((10, 300), True),  # touching the left wall counts
        ((0, 300), True),
        ((790, 300), True),
        ((780, 300), False),
        ((400, 20), True),
        ((400, 30), False),
        ((400, 610), True),
        ((400, 600), False),
    ],
)
def test_wall_collision_is_inclusive(head, hit):
    assert Snake(head).is_collision(MIN, MAX) is hit


def test_self_collision():
    snake = Snake((400, 300), body=deque([(410, 300), (400, 300)]), count=2)
    assert snake.is_collision(MIN, MAX)


def test_is_collision_does_not_mutate():
    snake = Snake((400, 300), body=deque([(410, 300)]), count=1)
    snake.is_collision(MIN, MAX)
    assert snake.head == (400, 300)
    assert list(snake.body) == [(410, 300)]
