"""Centralized configuration and palette definitions for Grid Snake."""

from __future__ import annotations

from enum import Enum

import pygame

SQUARE: int = 10  # one grid cell, in pixels
WINDOW_WIDTH: int = 80 * SQUARE
WINDOW_HEIGHT: int = 62 * SQUARE
MAP_WIDTH: int = 80 * SQUARE
MAP_HEIGHT: int = 60 * SQUARE  # two rows above the map hold the score
TITLE: str = "Grid Snake"
FPS: int = 60

START_POSITION: tuple[int, int] = (400, 300)

INITIAL_SPEED: float = 0.15  # seconds per move
# (food eaten must exceed, seconds per move), checked top to bottom
SPEED_STEPS: tuple[tuple[int, float], ...] = (
    (100, 0.03),
    (60, 0.05),
    (30, 0.075),
    (10, 0.1),
)
POINTS_PER_FOOD: int = 10

SCORE_FONT_SIZE: int = 25
SCORE_POSITION: tuple[int, int] = (15, 25)
MESSAGE_FONT_SIZE: int = 30
GAME_OVER_MESSAGE: tuple[str, ...] = (
    "GAME OVER.",
    "Press [Enter] to play again.",
)

PALETTE = {
    "background": pygame.Color(200, 200, 200),
    "game_over": pygame.Color(230, 41, 55),
    "map": pygame.Color(0, 0, 0),
    "food": pygame.Color(255, 203, 0),
    "head": pygame.Color(0, 228, 48),
    "body": pygame.Color(0, 117, 44),
    "text": pygame.Color(0, 0, 0),
    "message": pygame.Color(230, 41, 55),
}


class Key(Enum):
    """Logical keys the game polls; physical keys are bound in KEY_BINDINGS."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"


KEY_BINDINGS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.RESTART,
    pygame.K_KP_ENTER: Key.RESTART,
}
