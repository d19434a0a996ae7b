"""
Core engine module.

Exports:
- Game, GameConfig: Frame driver and configuration
- Scene, SceneManager: Scene management
- Component: Data-only record base
- EventBus, Event: Event system
- Action: Input actions
"""

from tile_engine.core.game import Game, GameConfig
from tile_engine.core.scene import Scene, SceneManager
from tile_engine.core.component import Component
from tile_engine.core.events import EventBus, Event
from tile_engine.core.actions import Action

__all__ = [
    # Game
    "Game",
    "GameConfig",
    # Scene
    "Scene",
    "SceneManager",
    # Data
    "Component",
    # Events
    "EventBus",
    "Event",
    # Input
    "Action",
]
