"""
Exploration scene - the only scene in the game.

Each frame: read the movement intent snapshot, run one simulation
tick, then redraw the map and HUD and present the frame.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pygame

from tile_engine.core import Action, Scene
from tile_engine.graphics import SurfacePresenter, SurfaceRenderer
from border_blaster import settings
from border_blaster.hud import Hud
from border_blaster.simulation import Simulation
from border_blaster.systems import WorldRenderer

if TYPE_CHECKING:
    from tile_engine.core import Game


logger = logging.getLogger(__name__)


class ExplorationScene(Scene):
    """Player exploration of the region map."""

    def __init__(self, game: Game, simulation: Optional[Simulation] = None):
        super().__init__(game)
        self.simulation = simulation or Simulation.create_default(game.event_bus)
        self.hud = Hud(self.simulation.event_bus)

        # One window-sized frame; map and HUD draw into their own areas
        self.frame = pygame.Surface((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
        map_surface = self.frame.subsurface(
            pygame.Rect(0, 0, settings.MAP_PIXEL_WIDTH, settings.MAP_PIXEL_HEIGHT)
        )
        hud_surface = self.frame.subsurface(
            pygame.Rect(0, settings.MAP_PIXEL_HEIGHT, settings.WINDOW_WIDTH, settings.HUD_HEIGHT)
        )

        self.world_renderer = WorldRenderer(SurfaceRenderer(map_surface))
        self.hud_renderer = SurfaceRenderer(hud_surface)
        self.presenter = SurfacePresenter(game.ctx)

    def on_enter(self) -> None:
        super().on_enter()
        # Startup HUD values
        self.simulation.announce_region()

    def on_destroy(self) -> None:
        self.hud.detach()
        self.presenter.release()

    def update(self, dt: float) -> None:
        game_input = self.game.input

        if game_input.is_action_just_pressed(Action.QUIT):
            self.game.quit()
            return

        if game_input.is_action_just_pressed(Action.DEBUG_TOGGLE):
            self.game.debug_mode = not self.game.debug_mode
            logger.info("Debug mode: %s", self.game.debug_mode)

        self.simulation.tick(game_input.movement_intent())

    def render(self) -> None:
        self.simulation.render(self.world_renderer)
        self.hud.render(self.hud_renderer)
        self.presenter.present(self.frame)
