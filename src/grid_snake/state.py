"""Game state and the Playing / GameOver state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from .config import INITIAL_SPEED, POINTS_PER_FOOD, START_POSITION, Key
from .controls import Controls, handle_input
from .rules import DEFAULT_BOUNDS, Bounds, gen_food, increase_speed
from .snake import Point, Snake

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class GameState:
    snake: Snake
    food: Point
    bounds: Bounds
    speed: float
    updated_time: float
    phase: Phase = Phase.PLAYING

    @property
    def score(self) -> int:
        return self.snake.count * POINTS_PER_FOOD

    @property
    def is_gameover(self) -> bool:
        return self.phase is Phase.GAME_OVER


def new_game(
    rng: random.Random, now: float, bounds: Bounds = DEFAULT_BOUNDS
) -> GameState:
    """Fresh snake in the middle of the map, heading left."""
    return GameState(
        snake=Snake(START_POSITION),
        food=gen_food(bounds, rng),
        bounds=bounds,
        speed=INITIAL_SPEED,
        updated_time=now,
    )


def restart(state: GameState, rng: random.Random, now: float) -> None:
    """Reset snake, food, speed and timer in place and resume play."""
    fresh = new_game(rng, now, state.bounds)
    state.snake = fresh.snake
    state.food = fresh.food
    state.speed = fresh.speed
    state.updated_time = fresh.updated_time
    state.phase = Phase.PLAYING
    logger.info("Restarted")


def tick(state: GameState, controls: Controls, rng: random.Random) -> None:
    """Advance the game by exactly one grid cell."""
    snake = state.snake
    handle_input(snake, controls)
    snake.move_to()
    if snake.has_eaten_food(state.food):
        state.food = gen_food(state.bounds, rng)
        logger.debug("Ate food #%d, next food at %s", snake.count, state.food)

    if snake.is_collision(state.bounds.min_point, state.bounds.max_point):
        state.phase = Phase.GAME_OVER
        logger.info(
            "Game over at %s: score=%d length=%d",
            snake.head,
            state.score,
            len(snake.body) + 1,
        )

    speed = increase_speed(snake, state.speed)
    if speed != state.speed:
        logger.debug("Tick interval %.3fs -> %.3fs", state.speed, speed)
        state.speed = speed


def update(
    state: GameState, now: float, controls: Controls, rng: random.Random
) -> bool:
    """Per-frame entry point; returns True when a tick ran this frame."""
    if state.phase is Phase.GAME_OVER:
        if controls.is_key_down(Key.RESTART):
            restart(state, rng, now)
        return False

    if now - state.updated_time > state.speed:
        state.updated_time = now
        tick(state, controls, rng)
        return True
    return False
