import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure packages can be imported from a source checkout
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.quit'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.time'), \
         patch('pygame.image'), \
         patch('pygame.joystick'), \
         patch('pygame.key'), \
         patch('pygame.mouse'), \
         patch('pygame.Surface'):

        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)

        yield

@pytest.fixture
def mock_draw():
    """
    Patch pygame.draw and pygame.font.

    Fonts report a fixed 30x16 size and render surfaces whose rects
    are real pygame.Rect objects, so layout code can do arithmetic.
    """
    import pygame

    with patch('pygame.draw') as draw, patch('pygame.font') as font_module:
        font = MagicMock()
        font.get_height.return_value = 16
        font.size.side_effect = lambda text: (len(text) * 6, 16)
        font.render.return_value.get_rect.side_effect = lambda: pygame.Rect(0, 0, 30, 16)
        font_module.SysFont.return_value = font
        font_module.Font.return_value = font
        yield draw

@pytest.fixture
def mock_moderngl():
    """Mock moderngl context for graphics tests."""
    with patch('moderngl.create_context') as mock_create:
        ctx = MagicMock()
        mock_create.return_value = ctx
        yield ctx

@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from tile_engine.core.events import EventBus
    return EventBus()

@pytest.fixture
def registry():
    """Registry holding the built-in regions."""
    from border_blaster.world import create_registry
    return create_registry()

@pytest.fixture
def grid(registry):
    """Built-in 10x10 map."""
    from border_blaster.world import create_grid
    return create_grid(registry)

@pytest.fixture
def simulation(event_bus):
    """Default simulation wired to the test event bus."""
    from border_blaster.simulation import Simulation
    return Simulation.create_default(event_bus)
