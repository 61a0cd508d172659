"""Drawing surface the garden core paints onto."""
from __future__ import annotations

from typing import Dict, Protocol, Tuple

import pygame

from fractalgarden.errors import SurfaceError
from fractalgarden.patterns.palette import Color

Vec2 = Tuple[float, float]

# Fonts with colour emoji coverage first, plain text fonts last.
GLYPH_FONTS = "segoeuiemoji,applecoloremoji,notocoloremoji,symbola,dejavusans,arial"
TEXT_FONTS = "arial,dejavusans,consolas"

# pygame reports bad colours and coordinates as ValueError/TypeError.
DRAW_ERRORS = (pygame.error, ValueError, TypeError)


class Canvas(Protocol):
    width: int
    height: int

    def clear(self, color: Color) -> None: ...

    def draw_glyph(self, text: str, x: float, y: float, size: float) -> None: ...

    def draw_circle(self, color: Color, x: float, y: float, radius: float) -> None: ...

    def draw_line(self, color: Color, start: Vec2, end: Vec2, alpha: float = 1.0) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: float, color: Color) -> None: ...


class PygameCanvas:
    """Canvas backed by two pygame surfaces.

    Motifs go on the opaque base surface; debug skeleton lines go on a
    transparent layer so they can carry alpha. compose() blits both.
    """

    def __init__(self, width: int, height: int, glyph_color: Color = (255, 255, 255)) -> None:
        self.width = width
        self.height = height
        self.glyph_color = glyph_color
        self.surface = pygame.Surface((width, height))
        self.skeleton_surface = pygame.Surface((width, height), pygame.SRCALPHA)
        # cached fonts: key = (font list, pixel size)
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

    def _font(self, names: str, size: float) -> pygame.font.Font:
        key = (names, max(1, int(round(size))))
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.SysFont(names, key[1])
            self._fonts[key] = font
        return font

    def clear(self, color: Color) -> None:
        try:
            self.surface.fill(color)
            self.skeleton_surface.fill((0, 0, 0, 0))
        except DRAW_ERRORS as e:
            raise SurfaceError(f"clear failed: {e}") from e

    def draw_glyph(self, text: str, x: float, y: float, size: float) -> None:
        if not text:
            return
        try:
            img = self._font(GLYPH_FONTS, size).render(text, True, self.glyph_color)
            self.surface.blit(img, img.get_rect(center=(int(x), int(y))))
        except DRAW_ERRORS as e:
            raise SurfaceError(f"glyph {text!r} failed: {e}") from e

    def draw_circle(self, color: Color, x: float, y: float, radius: float) -> None:
        try:
            pygame.draw.circle(self.surface, color, (int(x), int(y)), max(1, int(radius)))
        except DRAW_ERRORS as e:
            raise SurfaceError(f"circle failed: {e}") from e

    def draw_line(self, color: Color, start: Vec2, end: Vec2, alpha: float = 1.0) -> None:
        a = max(0, min(255, int(alpha * 255)))
        try:
            pygame.draw.line(self.skeleton_surface, (*color, a), start, end, 1)
        except DRAW_ERRORS as e:
            raise SurfaceError(f"line failed: {e}") from e

    def draw_text(self, text: str, x: float, y: float, size: float, color: Color) -> None:
        # Anchored at the left baseline, like a 2D canvas fillText.
        try:
            font = self._font(TEXT_FONTS, size)
            img = font.render(text, True, color)
            self.surface.blit(img, (int(x), int(y) - font.get_ascent()))
        except DRAW_ERRORS as e:
            raise SurfaceError(f"text failed: {e}") from e

    def compose(self, target: pygame.Surface, dest: Tuple[int, int] = (0, 0)) -> None:
        target.blit(self.surface, dest)
        target.blit(self.skeleton_surface, dest)
