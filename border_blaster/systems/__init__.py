"""Game logic: movement, interaction detection and world rendering."""

from border_blaster.systems.movement import MovementController, resolve_direction
from border_blaster.systems.interaction import find_adjacent_npc, interaction_message
from border_blaster.systems.render import WorldRenderer

__all__ = [
    "MovementController",
    "resolve_direction",
    "find_adjacent_npc",
    "interaction_message",
    "WorldRenderer",
]
