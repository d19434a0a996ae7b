"""World data: regions, the tile grid and built-in content."""

from border_blaster.world.regions import SENTINEL_CODE, RegionInfo, RegionRegistry
from border_blaster.world.grid import WorldGrid
from border_blaster.world.content import MAP_LAYOUT, NPCS, REGIONS, create_grid, create_registry

__all__ = [
    "SENTINEL_CODE",
    "RegionInfo",
    "RegionRegistry",
    "WorldGrid",
    "REGIONS",
    "MAP_LAYOUT",
    "NPCS",
    "create_registry",
    "create_grid",
]
