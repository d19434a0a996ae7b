"""
World grid - fixed 2D array of region codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from border_blaster.world.regions import SENTINEL_CODE

if TYPE_CHECKING:
    from border_blaster.world.regions import RegionRegistry


logger = logging.getLogger(__name__)


class WorldGrid:
    """
    Read-only tile map addressed as (x, y) = (column, row).

    Queries never fail: anything outside the map, and any empty cell,
    reads as the sentinel code. Cells holding a code the registry does
    not know are kept as-is and resolve to the sentinel at lookup.
    """

    def __init__(
        self,
        rows: Sequence[Sequence[Optional[str]]],
        registry: Optional[RegionRegistry] = None,
        sentinel_code: str = SENTINEL_CODE,
    ):
        if not rows or not rows[0]:
            raise ValueError("World grid needs at least one row and one column")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"World grid row {y} has {len(row)} cells, expected {width}"
                )

        self._sentinel_code = registry.sentinel_code if registry else sentinel_code
        self._cells = np.array(
            [[cell or self._sentinel_code for cell in row] for row in rows],
            dtype=object,
        )
        self._cells.flags.writeable = False

        if registry is not None:
            self._validate(registry)

    def _validate(self, registry: RegionRegistry) -> None:
        """Log codes the registry cannot resolve."""
        unknown = sorted({
            code for code in self._cells.flat if code not in registry
        })
        for code in unknown:
            logger.warning(
                "Grid references unknown region %r; it will render as %r",
                code, registry.sentinel_code,
            )

    @property
    def width(self) -> int:
        """Width in tiles."""
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        """Height in tiles."""
        return self._cells.shape[0]

    def in_bounds(self, x: float, y: float) -> bool:
        """Check whether a tile lies on the map."""
        return 0 <= x < self.width and 0 <= y < self.height

    def region_at(self, x: float, y: float) -> str:
        """
        Get the region code at a tile, or the sentinel when off-map.

        Fractional coordinates address the tile that contains them.
        """
        if not self.in_bounds(x, y):
            return self._sentinel_code
        return self._cells[int(y), int(x)]
