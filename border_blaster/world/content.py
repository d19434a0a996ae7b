"""
Built-in world content: regions, map layout and NPCs.

The map loosely positions countries north-to-south for quick
recognition. Cells set to ``None`` or the sentinel are open sea.
"""

from __future__ import annotations

from border_blaster.components import NPC
from border_blaster.world.grid import WorldGrid
from border_blaster.world.regions import SENTINEL_CODE, RegionInfo, RegionRegistry


REGIONS: tuple[RegionInfo, ...] = (
    RegionInfo(code="EG", name="Egypt", color="#f1c40f",
               fact="Home to the Nile River and pyramids."),
    RegionInfo(code="KE", name="Kenya", color="#16a085",
               fact="Famed for safaris and the Great Rift Valley."),
    RegionInfo(code="TZ", name="Tanzania", color="#2980b9",
               fact="Mount Kilimanjaro touches the sky here."),
    RegionInfo(code="MA", name="Morocco", color="#e67e22",
               fact="Spice markets and labyrinthine medinas."),
    RegionInfo(code="ZA", name="South Africa", color="#9b59b6",
               fact="Table Mountain watches over Cape Town."),
    RegionInfo(code=SENTINEL_CODE, name="Open Sea", color="#b2bec3",
               fact="Splash zone - upgrade to add islands!"),
)

MAP_LAYOUT: tuple[tuple[str, ...], ...] = (
    ("MA", "MA", "MA", "MA", "MA", "MA", "MA", "EG", "EG", "EG"),
    ("MA", "MA", "MA", "MA", "MA", "MA", "MA", "EG", "EG", "EG"),
    ("XX", "MA", "MA", "MA", "MA", "MA", "KE", "EG", "EG", "EG"),
    ("XX", "XX", "MA", "MA", "MA", "KE", "KE", "EG", "EG", "EG"),
    ("XX", "XX", "XX", "KE", "KE", "KE", "KE", "EG", "EG", "EG"),
    ("XX", "XX", "XX", "KE", "KE", "TZ", "TZ", "TZ", "EG", "EG"),
    ("XX", "XX", "XX", "KE", "TZ", "TZ", "TZ", "TZ", "EG", "EG"),
    ("XX", "XX", "XX", "KE", "TZ", "TZ", "TZ", "TZ", "ZA", "ZA"),
    ("XX", "XX", "XX", "XX", "TZ", "TZ", "TZ", "ZA", "ZA", "ZA"),
    ("XX", "XX", "XX", "XX", "TZ", "TZ", "ZA", "ZA", "ZA", "ZA"),
)

NPCS: tuple[NPC, ...] = (
    NPC(name="Cairo Courier", x=8, y=1, country="EG",
        dialog="Desert winds whisper secrets of the Nile."),
    NPC(name="Marrakesh DJ", x=2, y=2, country="MA",
        dialog="Spinning pop hits and serving mint tea refills!"),
    NPC(name="Serengeti Guide", x=5, y=5, country="TZ",
        dialog="Lions ahead! Well, plushy lion mascots for now."),
    NPC(name="Nairobi Hacker", x=6, y=3, country="KE",
        dialog="Building apps that track flamingo dance parties."),
    NPC(name="Cape Town Surfer", x=8, y=8, country="ZA",
        dialog="Ready to ride the data wave and real waves."),
)


def create_registry() -> RegionRegistry:
    """Registry holding the built-in regions."""
    return RegionRegistry(REGIONS)


def create_grid(registry: RegionRegistry) -> WorldGrid:
    """Grid holding the built-in map layout."""
    return WorldGrid(MAP_LAYOUT, registry)
