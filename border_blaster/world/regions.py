"""
Region registry - static display attributes per region code.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import ConfigDict

from tile_engine.core import Component


# Code of the fallback region for unknown codes and off-map tiles
SENTINEL_CODE = "XX"


class RegionInfo(Component):
    """
    Display attributes for one region.

    Attributes:
        code: Short region identifier used by the grid
        name: Display name
        color: Tile fill color
        fact: One-line description shown in the HUD
    """
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    color: str
    fact: str


class RegionRegistry:
    """
    Immutable mapping of region code -> RegionInfo.

    Unknown codes are a modelled case: lookup() falls back to the
    sentinel entry instead of failing.
    """

    def __init__(
        self,
        regions: Iterable[RegionInfo],
        sentinel_code: str = SENTINEL_CODE,
    ):
        self._regions: dict[str, RegionInfo] = {
            region.code: region for region in regions
        }
        if sentinel_code not in self._regions:
            raise ValueError(f"Region registry is missing sentinel code {sentinel_code!r}")
        self._sentinel_code = sentinel_code

    @property
    def sentinel_code(self) -> str:
        return self._sentinel_code

    @property
    def sentinel(self) -> RegionInfo:
        """The fallback region."""
        return self._regions[self._sentinel_code]

    def lookup(self, code: str | None) -> RegionInfo:
        """Get the region for a code, or the sentinel if unknown."""
        if code is None:
            return self.sentinel
        return self._regions.get(code, self.sentinel)

    def __contains__(self, code: object) -> bool:
        return code in self._regions
