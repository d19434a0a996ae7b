"""
Core Game class with a display-synchronised frame loop.

The Game class is the main entry point for the engine. It handles:
- Window creation (Pygame + ModernGL)
- One update and one render per display refresh
- Scene management delegation
- Global resource management (event bus, input)
"""

from __future__ import annotations

import logging
import time

import moderngl
import pygame

from tile_engine.core.events import EventBus
from tile_engine.core.scene import SceneManager
from tile_engine.input.handler import InputHandler


logger = logging.getLogger(__name__)


class GameConfig:
    """Configuration for the game engine."""

    def __init__(
        self,
        title: str = "Tile Engine",
        width: int = 640,
        height: int = 720,
        target_fps: int = 60,
        vsync: bool = True,
    ):
        self.title = title
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.vsync = vsync


class Game:
    """
    Main game engine class.

    Each frame runs to completion before yielding: pending window and
    input events are drained, the active scene updates exactly once,
    the scene renders, and the loop waits for the next refresh. There
    is no accumulator, so frames are never skipped or batched.

    Usage:
        game = Game(GameConfig(title="My Game"))
        game.scene_manager.push(MyStartScene(game))
        game.run()
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._running = False

        pygame.init()

        # Set OpenGL attributes
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK,
            pygame.GL_CONTEXT_PROFILE_CORE
        )

        # Create window
        flags = pygame.OPENGL | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags,
            vsync=1 if self.config.vsync else 0,
        )
        pygame.display.set_caption(self.config.title)

        # Create ModernGL context
        self.ctx = moderngl.create_context()
        self.ctx.enable(moderngl.BLEND)
        self.ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA

        # Core systems
        self.event_bus = EventBus()
        self.input = InputHandler()
        self.scene_manager = SceneManager(self)

        # Timing
        self._clock = pygame.time.Clock()
        self._delta_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = time.perf_counter()

        # Debug info
        self.debug_mode = False

    def run(self) -> None:
        """
        Start the main loop.

        Runs until the window is closed or quit() is called.
        """
        self._running = True
        logger.info("Starting %s at %dx%d", self.config.title,
                    self.config.width, self.config.height)

        while self._running:
            self.tick()

        self._shutdown()

    def tick(self) -> None:
        """Run exactly one frame: events, update, render, then wait."""
        self._process_events()
        self.input.update()
        self.scene_manager.update(self._delta_time)
        self._render()
        self._update_fps()

        # Yield until the next refresh
        self._delta_time = self._clock.tick(self.config.target_fps) / 1000.0

    def quit(self) -> None:
        """Request game shutdown."""
        self._running = False

    def _process_events(self) -> None:
        """Process Pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            else:
                self.input.process_event(event)

    def _render(self) -> None:
        """Render the current frame."""
        self.ctx.clear(0.0, 0.0, 0.0, 1.0)
        self.scene_manager.render()
        pygame.display.flip()

    def _update_fps(self) -> None:
        """Update FPS counter."""
        self._frame_count += 1
        current = time.perf_counter()

        if current - self._fps_update_time >= 1.0:
            self._fps = self._frame_count / (current - self._fps_update_time)
            self._frame_count = 0
            self._fps_update_time = current

            if self.debug_mode:
                pygame.display.set_caption(
                    f"{self.config.title} | FPS: {self._fps:.1f}"
                )

    def _shutdown(self) -> None:
        """Clean shutdown."""
        logger.info("Shutting down")
        self.scene_manager.clear()
        pygame.quit()
