import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock
import pygame
from tile_engine.core.events import EventBus
from tile_engine.input import InputHandler
from border_blaster import settings
from border_blaster.scene import ExplorationScene

def press(game, key):
    game.input.process_event(SimpleNamespace(type=pygame.KEYDOWN, key=key))
    game.input.update()

@pytest.fixture
def game(mock_draw):
    game = MagicMock()
    game.event_bus = EventBus()
    game.input = InputHandler()
    game.debug_mode = False
    return game

@pytest.fixture
def scene(game):
    scene = ExplorationScene(game)
    scene.on_enter()
    return scene

def test_frame_surface_layout(scene):
    pygame.Surface.assert_called_once_with((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
    subsurfaces = [c.args[0] for c in scene.frame.subsurface.call_args_list]
    assert subsurfaces == [
        pygame.Rect(0, 0, 640, 640),
        pygame.Rect(0, 640, 640, settings.HUD_HEIGHT),
    ]

def test_enter_announces_start_region(scene):
    assert scene.hud.region_name == "Morocco"

def test_held_key_moves_every_frame(scene, game):
    press(game, pygame.K_DOWN)

    scene.update(0.016)
    scene.update(0.016)

    assert scene.simulation.player.position == (1, 3)

def test_up_and_left_held_moves_up_only(scene, game):
    press(game, pygame.K_w)
    press(game, pygame.K_a)

    scene.update(0.016)

    assert scene.simulation.player.position == (1, 0)

def test_escape_quits_without_moving(scene, game):
    press(game, pygame.K_ESCAPE)
    game.input.process_event(SimpleNamespace(type=pygame.KEYDOWN, key=pygame.K_UP))

    scene.update(0.016)

    game.quit.assert_called_once()
    assert scene.simulation.player.position == (1, 1)

def test_debug_toggle(scene, game):
    press(game, pygame.K_F3)
    scene.update(0.016)
    assert game.debug_mode is True

def test_render_draws_map_hud_and_presents(scene, mock_draw):
    scene.render()

    # 100 tiles, 22 grid lines, 5 NPC markers and the player
    assert mock_draw.rect.call_count == 100
    assert mock_draw.circle.call_count == 6
    scene.game.ctx.program.assert_called_once()
    pygame.image.tobytes.assert_called_once_with(scene.frame, "RGBA", True)

def test_render_runs_even_without_movement(scene, mock_draw):
    scene.render()
    scene.render()

    assert mock_draw.rect.call_count == 200

def test_destroy_detaches_hud(scene, game):
    scene.on_destroy()
    # HUD no longer tracks events
    scene.hud.region_name = "stale"
    scene.simulation.announce_region()
    assert scene.hud.region_name == "stale"
