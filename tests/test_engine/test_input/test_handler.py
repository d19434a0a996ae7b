import pytest
from types import SimpleNamespace
import pygame
from tile_engine.core.actions import Action
from tile_engine.input.handler import InputHandler, MovementIntent

def key_down(handler, key):
    handler.process_event(SimpleNamespace(type=pygame.KEYDOWN, key=key))

def key_up(handler, key):
    handler.process_event(SimpleNamespace(type=pygame.KEYUP, key=key))

def test_action_state():
    handler = InputHandler()
    # Manually inject state
    handler._held_keys.add(pygame.K_UP)

    assert handler.is_action_pressed(Action.MOVE_UP)
    assert not handler.is_action_pressed(Action.MOVE_DOWN)

def test_arrow_and_letter_alias_map_to_same_action():
    handler = InputHandler()

    key_down(handler, pygame.K_w)
    assert handler.is_action_pressed(Action.MOVE_UP)
    key_up(handler, pygame.K_w)
    assert not handler.is_action_pressed(Action.MOVE_UP)

    key_down(handler, pygame.K_UP)
    assert handler.is_action_pressed(Action.MOVE_UP)

def test_action_held_while_any_bound_key_is_down():
    handler = InputHandler()

    key_down(handler, pygame.K_LEFT)
    key_down(handler, pygame.K_a)
    key_up(handler, pygame.K_LEFT)
    assert handler.is_action_pressed(Action.MOVE_LEFT)

    key_up(handler, pygame.K_a)
    assert not handler.is_action_pressed(Action.MOVE_LEFT)

def test_unbound_key_is_ignored():
    handler = InputHandler()
    key_down(handler, pygame.K_q)

    assert handler.movement_intent() == MovementIntent()

def test_non_key_events_are_ignored():
    handler = InputHandler()
    handler.process_event(SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, button=1))

    assert handler.movement_intent() == MovementIntent()

def test_movement_intent_snapshot():
    handler = InputHandler()
    key_down(handler, pygame.K_UP)
    key_down(handler, pygame.K_a)

    intent = handler.movement_intent()
    assert intent == MovementIntent(up=True, left=True)

    # Snapshot does not follow later key changes
    key_up(handler, pygame.K_UP)
    assert intent.up
    assert not handler.movement_intent().up

def test_intent_is_level_triggered():
    handler = InputHandler()
    key_down(handler, pygame.K_RIGHT)

    for _ in range(3):
        handler.update()
        assert handler.movement_intent().right

def test_just_pressed_lasts_one_update():
    handler = InputHandler()

    key_down(handler, pygame.K_ESCAPE)
    assert not handler.is_action_just_pressed(Action.QUIT)

    handler.update()
    assert handler.is_action_just_pressed(Action.QUIT)

    handler.update()
    assert not handler.is_action_just_pressed(Action.QUIT)

    key_up(handler, pygame.K_ESCAPE)
    key_down(handler, pygame.K_ESCAPE)
    handler.update()
    # Released and pressed again between frames looks like a held key
    assert not handler.is_action_just_pressed(Action.QUIT)

def test_custom_bindings():
    handler = InputHandler({Action.MOVE_UP: [pygame.K_i]})

    key_down(handler, pygame.K_w)
    assert not handler.is_action_pressed(Action.MOVE_UP)

    key_down(handler, pygame.K_i)
    assert handler.movement_intent() == MovementIntent(up=True)
