import pytest
from unittest.mock import MagicMock
import pygame
from tile_engine.graphics.presenter import QUAD_VERTICES, SurfacePresenter

@pytest.fixture
def surface():
    surface = MagicMock()
    surface.get_size.return_value = (640, 720)
    return surface

def test_first_present_builds_pipeline(mock_moderngl, surface):
    mock_moderngl.texture.return_value.size = (640, 720)
    presenter = SurfacePresenter(mock_moderngl)

    presenter.present(surface)

    mock_moderngl.program.assert_called_once()
    mock_moderngl.buffer.assert_called_once_with(QUAD_VERTICES.tobytes())
    pygame.image.tobytes.assert_called_once_with(surface, "RGBA", True)
    mock_moderngl.texture.assert_called_once_with((640, 720), 4, pygame.image.tobytes.return_value)
    mock_moderngl.vertex_array.return_value.render.assert_called_once()

def test_later_presents_reuse_texture(mock_moderngl, surface):
    texture = mock_moderngl.texture.return_value
    texture.size = (640, 720)
    presenter = SurfacePresenter(mock_moderngl)

    presenter.present(surface)
    presenter.present(surface)

    assert mock_moderngl.texture.call_count == 1
    texture.write.assert_called_once_with(pygame.image.tobytes.return_value)

def test_release(mock_moderngl, surface):
    mock_moderngl.texture.return_value.size = (640, 720)
    presenter = SurfacePresenter(mock_moderngl)
    presenter.present(surface)

    presenter.release()

    mock_moderngl.texture.return_value.release.assert_called_once()
    mock_moderngl.vertex_array.return_value.release.assert_called_once()
    mock_moderngl.buffer.return_value.release.assert_called_once()
    mock_moderngl.program.return_value.release.assert_called_once()

def test_release_before_present_is_noop(mock_moderngl):
    presenter = SurfacePresenter(mock_moderngl)

    presenter.release()

    mock_moderngl.buffer.assert_not_called()
