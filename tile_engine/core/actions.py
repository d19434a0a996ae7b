"""
Input action definitions.

Actions abstract raw keys into semantic intents. Game logic asks
about Actions, never about raw keys, so a logical direction can be
bound to several physical keys (arrow key plus letter alias).

Usage:
    if input.is_action_pressed(Action.MOVE_UP):
        ...

    if input.is_action_just_pressed(Action.DEBUG_TOGGLE):
        ...
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """Semantic input actions."""

    # Movement
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()

    # System
    QUIT = auto()
    DEBUG_TOGGLE = auto()


# Default key bindings (can be customized)
DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    # Movement
    Action.MOVE_UP: [pygame.K_UP, pygame.K_w],
    Action.MOVE_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
    Action.MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],

    # System
    Action.QUIT: [pygame.K_ESCAPE],
    Action.DEBUG_TOGGLE: [pygame.K_F3],
}
