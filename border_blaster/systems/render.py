"""
World render pipeline - full redraw of the map every frame.
"""

from __future__ import annotations

from typing import Iterable

from tile_engine.graphics import FontConfig, SurfaceRenderer
from border_blaster import settings
from border_blaster.components import NPC, Player
from border_blaster.world import RegionRegistry, WorldGrid


NPC_FONT = FontConfig(size=settings.NPC_FONT_SIZE)
PLAYER_FONT = FontConfig(size=settings.PLAYER_FONT_SIZE)


class WorldRenderer:
    """
    Draws tiles, grid lines, NPC markers and the player.

    Draw order is fixed: tiles, then grid lines, then NPCs, then the
    player, so markers are never covered and the player sits on top.
    The output depends only on the arguments to render().
    """

    def __init__(
        self,
        renderer: SurfaceRenderer,
        tile_size: int = settings.TILE_SIZE,
    ):
        self.renderer = renderer
        self.tile_size = tile_size

    def render(
        self,
        grid: WorldGrid,
        registry: RegionRegistry,
        player: Player,
        npcs: Iterable[NPC],
    ) -> None:
        """Redraw the whole scene."""
        self.renderer.clear(settings.CLEAR_COLOR)
        self._draw_tiles(grid, registry)
        self._draw_grid_lines(grid)
        self._draw_npcs(npcs)
        self._draw_player(player)

    def tile_center(self, x: int, y: int) -> tuple[float, float]:
        """Pixel centre of a tile."""
        half = self.tile_size / 2
        return (x * self.tile_size + half, y * self.tile_size + half)

    def _draw_tiles(self, grid: WorldGrid, registry: RegionRegistry) -> None:
        size = self.tile_size
        for y in range(grid.height):
            for x in range(grid.width):
                region = registry.lookup(grid.region_at(x, y))
                self.renderer.draw_rect(x * size, y * size, size, size, region.color)

    def _draw_grid_lines(self, grid: WorldGrid) -> None:
        size = self.tile_size
        pixel_width = grid.width * size
        pixel_height = grid.height * size

        for i in range(grid.width + 1):
            self.renderer.draw_line(
                i * size, 0, i * size, pixel_height,
                settings.GRID_LINE_COLOR, settings.GRID_LINE_WIDTH,
            )
        for j in range(grid.height + 1):
            self.renderer.draw_line(
                0, j * size, pixel_width, j * size,
                settings.GRID_LINE_COLOR, settings.GRID_LINE_WIDTH,
            )

    def _draw_npcs(self, npcs: Iterable[NPC]) -> None:
        for npc in npcs:
            cx, cy = self.tile_center(npc.x, npc.y)
            self.renderer.draw_circle(cx, cy, settings.NPC_RADIUS, settings.NPC_COLOR)
            self.renderer.draw_text(
                settings.NPC_LABEL, cx, cy,
                color=settings.LABEL_COLOR, font_config=NPC_FONT, align="center",
            )

    def _draw_player(self, player: Player) -> None:
        cx, cy = self.tile_center(player.x, player.y)
        self.renderer.draw_circle(cx, cy, settings.PLAYER_RADIUS, player.color)
        self.renderer.draw_text(
            settings.PLAYER_LABEL, cx, cy,
            color=settings.LABEL_COLOR, font_config=PLAYER_FONT, align="center",
        )
