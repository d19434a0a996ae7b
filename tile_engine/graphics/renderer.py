"""
Surface renderer for drawing primitives and text.

Provides a small immediate-mode API over a pygame surface. The
finished surface is handed to the presenter, which composites it
through ModernGL.

Usage:
    renderer = SurfaceRenderer(surface)
    renderer.clear()
    renderer.draw_rect(0, 0, 64, 64, "#f1c40f")
    renderer.draw_circle(32, 32, 20, "#2ecc71")
    renderer.draw_text("NPC", 32, 32, color="#ffffff", align="center")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import pygame


# Anything pygame.Color accepts: "#rrggbb", "#rrggbbaa", names, tuples
ColorValue = Union[str, tuple[int, ...], pygame.Color]


def to_color(value: ColorValue) -> pygame.Color:
    """Normalise a color spec into a pygame.Color."""
    if isinstance(value, pygame.Color):
        return value
    if isinstance(value, tuple):
        return pygame.Color(*value)
    return pygame.Color(value)


@dataclass(frozen=True)
class FontConfig:
    """Font configuration."""
    name: Optional[str] = None  # None = pygame default
    size: int = 16
    bold: bool = False
    italic: bool = False


class SurfaceRenderer:
    """
    Renderer for 2D primitives.

    Colors with alpha below 255 are drawn through a temporary
    per-pixel-alpha surface so they blend with what is underneath.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[FontConfig, pygame.font.Font] = {}
        self._default_font = FontConfig()

    def get_font(self, config: Optional[FontConfig] = None) -> pygame.font.Font:
        """Get or create a font from config."""
        if config is None:
            config = self._default_font

        if config not in self._fonts:
            if config.name:
                font = pygame.font.Font(config.name, config.size)
            else:
                font = pygame.font.SysFont(None, config.size)
            font.set_bold(config.bold)
            font.set_italic(config.italic)
            self._fonts[config] = font

        return self._fonts[config]

    def clear(self, color: ColorValue = (0, 0, 0, 0)) -> None:
        """Fill the whole surface."""
        self.surface.fill(to_color(color))

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: ColorValue,
    ) -> None:
        """Draw a filled rectangle."""
        color = to_color(color)
        rect = pygame.Rect(int(x), int(y), int(width), int(height))

        if color.a < 255:
            temp = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
            temp.fill(color)
            self.surface.blit(temp, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color, rect)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: ColorValue,
        thickness: int = 1,
    ) -> None:
        """Draw a line."""
        color = to_color(color)
        start = (int(x1), int(y1))
        end = (int(x2), int(y2))

        if color.a < 255:
            left = min(start[0], end[0])
            top = min(start[1], end[1])
            temp = pygame.Surface(
                (abs(end[0] - start[0]) + thickness, abs(end[1] - start[1]) + thickness),
                pygame.SRCALPHA,
            )
            pygame.draw.line(
                temp,
                color,
                (start[0] - left, start[1] - top),
                (end[0] - left, end[1] - top),
                thickness,
            )
            self.surface.blit(temp, (left, top))
        else:
            pygame.draw.line(self.surface, color, start, end, thickness)

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: ColorValue,
    ) -> None:
        """Draw a filled circle centred on (x, y)."""
        pygame.draw.circle(self.surface, to_color(color), (int(x), int(y)), int(radius))

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: ColorValue = (255, 255, 255),
        font_config: Optional[FontConfig] = None,
        align: str = "left",
        max_width: Optional[float] = None,
    ) -> pygame.Rect:
        """
        Draw text.

        Args:
            text: Text to render
            x, y: Position. With align="center" the text is centred
                on (x, y) both horizontally and vertically; otherwise
                y is the top of the first line.
            color: Text color
            font_config: Font settings
            align: "left", "center", or "right"
            max_width: Maximum width for word wrapping

        Returns:
            Bounding rect of rendered text
        """
        font = self.get_font(font_config)
        color = to_color(color)

        if max_width and text:
            lines = self.wrap_text(text, font_config, max_width)
        else:
            lines = [text]

        line_height = font.get_height()
        top = int(y)
        if align == "center":
            top = int(y) - (line_height * len(lines)) // 2

        total_rect = pygame.Rect(int(x), top, 0, 0)

        for i, line in enumerate(lines):
            if not line:
                continue

            text_surface = font.render(line, True, color)
            text_rect = text_surface.get_rect()

            if align == "center":
                text_rect.centerx = int(x)
            elif align == "right":
                text_rect.right = int(x)
            else:
                text_rect.left = int(x)

            text_rect.top = top + i * line_height

            self.surface.blit(text_surface, text_rect)
            total_rect = total_rect.union(text_rect)

        return total_rect

    def wrap_text(
        self,
        text: str,
        font_config: Optional[FontConfig],
        max_width: float,
    ) -> list[str]:
        """Wrap text to fit within max_width."""
        font = self.get_font(font_config)
        lines = []
        current_line = ""

        for word in text.split(' '):
            test_line = current_line + (" " if current_line else "") + word

            if font.size(test_line)[0] <= max_width:
                current_line = test_line
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

        return lines or [""]
