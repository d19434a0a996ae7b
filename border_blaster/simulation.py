"""
Simulation state - everything that changes while exploring.

The simulation owns the grid, region registry, player and NPCs and
runs one movement step per tick. It reports what happened on the
event bus; it knows nothing about the HUD or the window.

Events published after a successful move, in order:
    GameEvent.PLAYER_MOVED     x, y
    GameEvent.REGION_ENTERED   region (RegionInfo)
    GameEvent.NPC_INTERACTION  npc, message   (only when an NPC is adjacent)
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Optional

from tile_engine.core import EventBus
from tile_engine.input import MovementIntent
from border_blaster import settings
from border_blaster.components import NPC, Player
from border_blaster.systems import (
    MovementController,
    WorldRenderer,
    find_adjacent_npc,
    interaction_message,
)
from border_blaster.world import (
    NPCS,
    RegionInfo,
    RegionRegistry,
    WorldGrid,
    create_grid,
    create_registry,
)


logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Exploration events."""
    PLAYER_MOVED = auto()
    REGION_ENTERED = auto()
    NPC_INTERACTION = auto()


class Simulation:
    """
    Explicit simulation state passed to every operation.

    Attributes:
        grid: The tile map
        registry: Region display attributes
        player: The player token (moved only through tick())
        npcs: Stationary NPCs, in interaction tie-break order
        last_interaction: NPC greeted by the most recent successful move
    """

    def __init__(
        self,
        grid: WorldGrid,
        registry: RegionRegistry,
        player: Player,
        npcs: Iterable[NPC] = (),
        event_bus: Optional[EventBus] = None,
    ):
        if not grid.in_bounds(player.x, player.y):
            raise ValueError(
                f"Player start ({player.x}, {player.y}) is outside the "
                f"{grid.width}x{grid.height} grid"
            )

        self.grid = grid
        self.registry = registry
        self.player = player
        self.npcs: tuple[NPC, ...] = tuple(npcs)
        self.event_bus = event_bus or EventBus()
        self.movement = MovementController(grid)
        self.last_interaction: Optional[NPC] = None

    @classmethod
    def create_default(cls, event_bus: Optional[EventBus] = None) -> Simulation:
        """Simulation over the built-in map, regions and NPCs."""
        registry = create_registry()
        start_x, start_y = settings.PLAYER_START
        return cls(
            grid=create_grid(registry),
            registry=registry,
            player=Player(x=start_x, y=start_y),
            npcs=NPCS,
            event_bus=event_bus,
        )

    def current_region(self) -> RegionInfo:
        """Region under the player."""
        return self.registry.lookup(self.grid.region_at(*self.player.position))

    def announce_region(self) -> RegionInfo:
        """Publish the region under the player."""
        region = self.current_region()
        logger.info("Entered %s", region.name)
        self.event_bus.publish(GameEvent.REGION_ENTERED, region=region)
        return region

    def tick(self, intent: MovementIntent) -> bool:
        """
        Run one movement step.

        Returns:
            True if the player moved
        """
        moved = self.movement.step(self.player, intent)
        if moved:
            self._on_player_moved()
        return moved

    def render(self, world_renderer: WorldRenderer) -> None:
        """Draw the current state."""
        world_renderer.render(self.grid, self.registry, self.player, self.npcs)

    def _on_player_moved(self) -> None:
        self.event_bus.publish(
            GameEvent.PLAYER_MOVED, x=self.player.x, y=self.player.y
        )
        self.announce_region()

        npc = find_adjacent_npc(self.player, self.npcs)
        self.last_interaction = npc
        if npc is not None:
            message = interaction_message(npc)
            logger.info("NPC interaction: %s", message)
            self.event_bus.publish(GameEvent.NPC_INTERACTION, npc=npc, message=message)
