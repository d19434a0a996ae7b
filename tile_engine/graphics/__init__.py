"""Graphics module: software drawing surface and GL presentation."""

from tile_engine.graphics.renderer import FontConfig, SurfaceRenderer
from tile_engine.graphics.presenter import SurfacePresenter

__all__ = [
    "SurfaceRenderer",
    "FontConfig",
    "SurfacePresenter",
]
