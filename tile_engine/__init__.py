"""
Tile Engine

A small pygame + ModernGL host for grid-based games.

Quick Start:
    from tile_engine.core import Game, GameConfig, Scene

    class MyScene(Scene):
        def update(self, dt: float) -> None:
            pass

        def render(self) -> None:
            pass

    game = Game(GameConfig(title="My Game", width=640, height=720))
    game.scene_manager.push(MyScene(game))
    game.run()
"""

__version__ = "0.1.0"

from tile_engine.core import (
    Game,
    GameConfig,
    Scene,
    SceneManager,
    Component,
    EventBus,
    Event,
    Action,
)

from tile_engine.input import InputHandler, MovementIntent

__all__ = [
    # Core
    "Game",
    "GameConfig",
    "Scene",
    "SceneManager",
    "Component",
    # Events
    "EventBus",
    "Event",
    # Input
    "InputHandler",
    "MovementIntent",
    "Action",
]
