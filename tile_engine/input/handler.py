"""
Input handler with action-based abstraction.

Translates raw keyboard events into semantic Actions. Key events
arrive from the host event loop at any point between frames; the
frame reads them once, through update() and movement_intent().

Usage:
    if input.is_action_just_pressed(Action.QUIT):
        ...

    intent = input.movement_intent()
    controller.step(player, intent)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

import pygame

from tile_engine.core.actions import Action, DEFAULT_KEY_BINDINGS


@dataclass(frozen=True)
class MovementIntent:
    """
    Snapshot of the logical direction flags for one tick.

    Flags are level-triggered: a held key stays True on every tick.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


class InputHandler:
    """
    Handles keyboard input processing.

    Each action may be bound to several keys; it stays pressed while
    any of its keys is held.
    """

    def __init__(self, bindings: Mapping[Action, Iterable[int]] | None = None):
        if bindings is None:
            bindings = DEFAULT_KEY_BINDINGS
        self._bindings: dict[Action, frozenset[int]] = {
            action: frozenset(keys) for action, keys in bindings.items()
        }

        self._held_keys: set[int] = set()
        self._prev_actions: frozenset[Action] = frozenset()
        self._just_pressed: frozenset[Action] = frozenset()

    def is_action_pressed(self, action: Action) -> bool:
        """Check if any key bound to an action is held."""
        return not self._held_keys.isdisjoint(self._bindings.get(action, ()))

    def is_action_just_pressed(self, action: Action) -> bool:
        """Check if an action went down since the previous update()."""
        return action in self._just_pressed

    def movement_intent(self) -> MovementIntent:
        """Take a snapshot of the movement flags."""
        return MovementIntent(
            up=self.is_action_pressed(Action.MOVE_UP),
            down=self.is_action_pressed(Action.MOVE_DOWN),
            left=self.is_action_pressed(Action.MOVE_LEFT),
            right=self.is_action_pressed(Action.MOVE_RIGHT),
        )

    def process_event(self, event: pygame.event.Event) -> None:
        """Track key state from a pygame event."""
        if event.type == pygame.KEYDOWN:
            self._held_keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)

    def update(self) -> None:
        """
        Update input state for new frame.

        Call this once at the start of each frame.
        """
        pressed = frozenset(
            action for action in self._bindings if self.is_action_pressed(action)
        )
        self._just_pressed = pressed - self._prev_actions
        self._prev_actions = pressed
