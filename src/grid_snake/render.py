"""Drawing for both game phases; holds no game state of its own."""

from __future__ import annotations

import pygame

from .config import (
    GAME_OVER_MESSAGE,
    MAP_HEIGHT,
    MAP_WIDTH,
    MESSAGE_FONT_SIZE,
    PALETTE,
    POINTS_PER_FOOD,
    SCORE_FONT_SIZE,
    SCORE_POSITION,
    SQUARE,
    WINDOW_HEIGHT,
)
from .snake import Point, Snake
from .state import GameState

# Play field drawn inset by one cell on every side of the map.
MAP_RECT = pygame.Rect(
    SQUARE,
    WINDOW_HEIGHT - MAP_HEIGHT + SQUARE,
    MAP_WIDTH - SQUARE * 2,
    MAP_HEIGHT - SQUARE * 2,
)


class Renderer:
    """Draws a GameState onto any surface (the window or an off-screen one)."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        # Default font: no asset files to ship or find.
        self.score_font = pygame.font.Font(None, SCORE_FONT_SIZE)
        self.message_font = pygame.font.Font(None, MESSAGE_FONT_SIZE)

    def draw(self, state: GameState) -> None:
        if state.is_gameover:
            self.draw_game_over(state.score)
        else:
            self.draw_playing(state.snake, state.food)

    def draw_playing(self, snake: Snake, food: Point) -> None:
        self.surface.fill(PALETTE["background"])
        pygame.draw.rect(self.surface, PALETTE["map"], MAP_RECT)

        self._draw_cell(food, PALETTE["food"])
        self._draw_cell(snake.head, PALETTE["head"])
        for segment in snake.body:
            self._draw_cell(segment, PALETTE["body"])

        self.show_score(snake.count * POINTS_PER_FOOD)

    def draw_game_over(self, score: int) -> None:
        self.surface.fill(PALETTE["game_over"])
        pygame.draw.rect(self.surface, PALETTE["map"], MAP_RECT)

        # Centre the whole message block on the map.
        sizes = [self.message_font.size(line) for line in GAME_OVER_MESSAGE]
        line_height = self.message_font.get_linesize()
        top = MAP_HEIGHT // 2 - (line_height * len(sizes)) // 2
        for idx, (line, (width, _)) in enumerate(zip(GAME_OVER_MESSAGE, sizes)):
            surf = self.message_font.render(line, True, PALETTE["message"])
            self.surface.blit(
                surf,
                (MAP_WIDTH // 2 - width // 2, top + idx * line_height),
            )

        self.show_score(score)

    def show_score(self, score: int) -> None:
        """Score text with its baseline at SCORE_POSITION."""
        text = self.score_font.render(f"Score: {score}", True, PALETTE["text"])
        x, baseline = SCORE_POSITION
        self.surface.blit(text, (x, baseline - self.score_font.get_ascent()))

    def _draw_cell(self, pos: Point, color: pygame.Color) -> None:
        pygame.draw.rect(
            self.surface,
            color,
            pygame.Rect(pos[0], pos[1], SQUARE, SQUARE),
        )
