"""
Movement controller - one bounded tile step per tick.
"""

from __future__ import annotations

import logging
from typing import Optional

from tile_engine.input import MovementIntent
from border_blaster.components import Direction, Player
from border_blaster.world import WorldGrid


logger = logging.getLogger(__name__)


def resolve_direction(intent: MovementIntent) -> Optional[Direction]:
    """
    Pick the single direction to attempt this tick.

    The first held direction in Direction order wins; held flags are
    never combined into a diagonal.
    """
    for direction in Direction:
        if getattr(intent, direction.name.lower()):
            return direction
    return None


class MovementController:
    """
    Moves the player across the grid.

    The controller is the only writer of the player's position, so
    the player can never end up off the map.
    """

    def __init__(self, grid: WorldGrid):
        self.grid = grid

    def attempt_move(self, player: Player, dx: int, dy: int) -> bool:
        """
        Move the player by (dx, dy) if the destination is on the map.

        Returns:
            True if the position changed
        """
        new_x = player.x + dx
        new_y = player.y + dy

        if not self.grid.in_bounds(new_x, new_y):
            logger.debug("Move to (%d, %d) blocked by map edge", new_x, new_y)
            return False

        player.x = new_x
        player.y = new_y
        logger.debug("Player moved to (%d, %d)", new_x, new_y)
        return True

    def step(self, player: Player, intent: MovementIntent) -> bool:
        """Attempt at most one move for this tick."""
        direction = resolve_direction(intent)
        if direction is None:
            return False

        dx, dy = direction.vector
        return self.attempt_move(player, dx, dy)
