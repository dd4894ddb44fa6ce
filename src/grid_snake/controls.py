"""Polled keyboard input and the steering rule."""

from __future__ import annotations

from typing import Protocol

import pygame

from .config import KEY_BINDINGS, Key
from .snake import Direction, Snake

# Checked in this order; the first pressed key that can steer wins.
STEERING: tuple[tuple[Key, Direction], ...] = (
    (Key.UP, Direction.UP),
    (Key.DOWN, Direction.DOWN),
    (Key.LEFT, Direction.LEFT),
    (Key.RIGHT, Direction.RIGHT),
)


class Controls(Protocol):
    def is_key_down(self, key: Key) -> bool: ...


def handle_input(snake: Snake, controls: Controls) -> None:
    """Apply at most one direction change from the keys held right now."""
    for key, direction in STEERING:
        if controls.is_key_down(key) and snake.turn(direction):
            return


class PygameControls:
    """Reads held keys from pygame's keyboard state."""

    def __init__(self, bindings: dict[int, Key] | None = None) -> None:
        self.bindings = KEY_BINDINGS if bindings is None else bindings

    def is_key_down(self, key: Key) -> bool:
        pressed = pygame.key.get_pressed()
        return any(
            pressed[code] for code, bound in self.bindings.items() if bound is key
        )
