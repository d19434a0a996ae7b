"""Input handling module."""

from tile_engine.input.handler import InputHandler, MovementIntent

__all__ = [
    "InputHandler",
    "MovementIntent",
]
