"""
Character components - player and NPC records.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from tile_engine.core import Component
from border_blaster import settings


class Player(Component):
    """
    The player token.

    Attributes:
        x: Tile column
        y: Tile row
        color: Marker color
    """
    x: int = 0
    y: int = 0
    color: str = settings.PLAYER_COLOR

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class NPC(Component):
    """
    A stationary non-player character.

    Attributes:
        name: Display name
        x: Tile column
        y: Tile row
        country: Region code the NPC belongs to (informational)
        dialog: Line spoken when the player steps next to them
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    x: int
    y: int
    country: str = ""
    dialog: str = ""

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)
