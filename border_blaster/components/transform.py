"""
Grid direction helpers.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """
    Cardinal directions.

    Declaration order is the movement precedence when several
    directions are held on the same tick.
    """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> tuple[int, int]:
        """Tile delta (dx, dy) for one step."""
        return self.value


def manhattan_distance(ax: int, ay: int, bx: int, by: int) -> int:
    """Tile distance with 4-directional steps."""
    return abs(ax - bx) + abs(ay - by)
