"""Grid Snake window and main loop: pygame in, GameState updates, pygame out."""

from __future__ import annotations

import logging
import random

import pygame

from .config import FPS, TITLE, WINDOW_HEIGHT, WINDOW_WIDTH
from .controls import Controls, PygameControls
from .render import Renderer
from .state import GameState, new_game, update

logger = logging.getLogger(__name__)


class SnakeGame:
    """Owns the window, clock and input; delegates rules to ``state``."""

    def __init__(
        self,
        controls: Controls | None = None,
        rng: random.Random | None = None,
    ) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.renderer = Renderer(self.window)
        self.controls = controls or PygameControls()
        self.rng = rng or random.Random()
        self.state: GameState = new_game(self.rng, self.now())

    @staticmethod
    def now() -> float:
        """Seconds since pygame.init(), monotonic."""
        return pygame.time.get_ticks() / 1000.0

    def handle_events(self) -> bool:
        """Drain the event queue; False once the player closes the game."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def frame(self) -> None:
        """One frame: maybe tick the rules, then always render."""
        update(self.state, self.now(), self.controls, self.rng)
        self.renderer.draw(self.state)

    def start(self) -> None:
        """Run the main loop until the window closes."""
        logger.info("Starting %s at %dx%d", TITLE, WINDOW_WIDTH, WINDOW_HEIGHT)
        clock = pygame.time.Clock()
        try:
            while self.handle_events():
                self.frame()
                pygame.display.update()
                clock.tick(FPS)
        finally:
            pygame.quit()
        logger.info("Closed with score %d", self.state.score)
