"""
canvas.py
---------
Immediate-mode 2D drawing context over a pygame Surface.

Holds the current fill color, text alignment, and font the way a canvas
context does, so drawing code sets state once and then issues calls.
Text y-coordinates are baselines.
"""

import os

import pygame

from src.core.runtime.game_settings import Colors, Fonts


class Canvas:
    """Stateful drawing helper bound to one target surface."""

    TEXT_ALIGNS = ("left", "center", "right")

    def __init__(self, surface: pygame.Surface):
        """
        Args:
            surface: Target surface (usually the display surface)
        """
        self.surface = surface
        self.width, self.height = surface.get_size()

        self.fill_style = pygame.Color(0, 0, 0)
        self.text_align = "left"
        self._font_key = (Fonts.DEFAULT, Fonts.HUD_SIZE)
        self._fonts = {}

    # ===========================================================
    # State
    # ===========================================================

    def set_fill_style(self, color):
        """Accepts an RGB(A) tuple or a pygame color name."""
        self.fill_style = pygame.Color(color)

    def set_text_align(self, align: str):
        if align not in self.TEXT_ALIGNS:
            raise ValueError(f"Unknown text alignment: {align}")
        self.text_align = align

    def set_font(self, size: int, name: str = Fonts.DEFAULT):
        """
        Select the font for subsequent `fill_text` calls.

        Args:
            size: Point size
            name: Font file inside Fonts.DIR, or None for pygame's default
        """
        self._font_key = (name, size)

    @property
    def font(self) -> pygame.font.Font:
        """Current font, created on first use and cached."""
        font = self._fonts.get(self._font_key)
        if font is None:
            name, size = self._font_key
            path = os.path.join(Fonts.DIR, name) if name else None
            font = pygame.font.Font(path, size)
            self._fonts[self._font_key] = font
        return font

    # ===========================================================
    # Drawing
    # ===========================================================

    def draw_image(self, image: pygame.Surface, x: float, y: float):
        self.surface.blit(image, (x, y))

    def fill_rect(self, x: float, y: float, width: float, height: float):
        self.surface.fill(self.fill_style, pygame.Rect(x, y, width, height))

    def clear_rect(self, x: float, y: float, width: float, height: float):
        self.surface.fill(Colors.CLEAR, pygame.Rect(x, y, width, height))

    def clear(self):
        """Clear the whole surface."""
        self.clear_rect(0, 0, self.width, self.height)

    def fill_text(self, text: str, x: float, y: float):
        """Draw text in the current fill style with its baseline at y."""
        font = self.font
        text_surf = font.render(text, True, self.fill_style)

        if self.text_align == "center":
            left = x - text_surf.get_width() / 2
        elif self.text_align == "right":
            left = x - text_surf.get_width()
        else:
            left = x

        self.surface.blit(text_surf, (left, y - font.get_ascent()))
