"""
Scene management.

A scene is one game state with its own update and render hooks. The
SceneManager keeps a stack and drives only the scene on top.

Pushes are deferred until the start of the next update, so a scene
can be queued before the loop starts or from inside another update.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tile_engine.core.game import Game


logger = logging.getLogger(__name__)


class Scene(ABC):
    """
    Abstract base class for game scenes.

    Lifecycle:
        1. __init__: Called when scene is created
        2. on_enter: Called when scene becomes active
        3. update/render: Called each frame while on top
        4. on_destroy: Called when scene is removed from the stack
    """

    def __init__(self, game: Game):
        self.game = game

    def on_enter(self) -> None:
        """Called when the scene becomes the top scene."""

    def on_destroy(self) -> None:
        """Called when the scene is permanently removed."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Update scene logic.

        Args:
            dt: Seconds since the previous frame
        """

    @abstractmethod
    def render(self) -> None:
        """Draw the scene for the current frame."""


class SceneManager:
    """Stack of scenes; only the top one is updated and rendered."""

    def __init__(self, game: Game):
        self.game = game
        self._stack: list[Scene] = []
        self._pending: list[Scene] = []

    @property
    def current(self) -> Scene | None:
        """Get the current (top) scene."""
        return self._stack[-1] if self._stack else None

    @property
    def is_empty(self) -> bool:
        return not self._stack and not self._pending

    def push(self, scene: Scene) -> None:
        """Queue a scene to go on top at the next update."""
        self._pending.append(scene)

    def clear(self) -> None:
        """Destroy every scene, top first. Runs immediately."""
        self._pending.clear()
        while self._stack:
            scene = self._stack.pop()
            scene.on_destroy()
            logger.debug("Destroyed scene %s", type(scene).__name__)

    def update(self, dt: float) -> None:
        """Apply queued pushes, then update the top scene."""
        while self._pending:
            scene = self._pending.pop(0)
            self._stack.append(scene)
            scene.on_enter()
            logger.debug("Pushed scene %s", type(scene).__name__)

        if self.current:
            self.current.update(dt)

    def render(self) -> None:
        """Render the top scene."""
        if self.current:
            self.current.render()
