"""Data-only components for the exploration game."""

from border_blaster.components.transform import Direction, manhattan_distance
from border_blaster.components.character import NPC, Player

__all__ = [
    "Direction",
    "manhattan_distance",
    "Player",
    "NPC",
]
