"""Entry point for the Grid Snake game."""

from __future__ import annotations

import logging

from grid_snake.game import SnakeGame


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = SnakeGame()
    game.start()


if __name__ == "__main__":
    main()
