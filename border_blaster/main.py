"""
Border Blaster entry point.

Run: python -m border_blaster

Controls:
- Arrow keys / WASD: Move one tile per frame
- F3: Toggle FPS in the window title
- ESC: Quit
"""

import logging

from tile_engine.core import Game, GameConfig
from border_blaster import settings
from border_blaster.scene import ExplorationScene


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(
        title=settings.WINDOW_TITLE,
        width=settings.WINDOW_WIDTH,
        height=settings.WINDOW_HEIGHT,
        target_fps=settings.TARGET_FPS,
    )

    game = Game(config)
    game.scene_manager.push(ExplorationScene(game))
    game.run()


if __name__ == "__main__":
    main()
