"""Pygame window hosting the garden canvas and its control strip."""
from typing import Optional, Tuple

import pygame

from fractalgarden.render.canvas import PygameCanvas


class GardenRenderer:
    def __init__(self, width: int, height: int, status_height: int = 64) -> None:
        pygame.init()
        self.width = width
        self.height = height + status_height
        self.canvas_rect = pygame.Rect(0, 0, width, height)
        self.status_rect = pygame.Rect(0, height, width, status_height)
        self.surface_flags = pygame.RESIZABLE
        # logical surface at native resolution; display may be larger in fullscreen
        self.surface = pygame.Surface((self.width, self.height))
        self.canvas = PygameCanvas(width, height)
        self.fullscreen = False
        self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        self.lb_off = (0, 0)  # letterbox offset when centering
        self.lb_scale = 1.0   # letterbox scale factor
        pygame.display.set_caption("Fractal Garden")
        self.font = pygame.font.SysFont("consolas", 18)
        self.small_font = pygame.font.SysFont("consolas", 14)
        self.bg = (17, 24, 39)
        self.fg = (220, 230, 240)
        self.dim = (120, 130, 150)
        self.sel = (168, 85, 247)
        self.quit_requested = False

    def _to_surface(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Convert display-space mouse coords to surface-space, accounting for letterbox and scale."""
        return (
            int((pos[0] - self.lb_off[0]) / max(1e-6, self.lb_scale)),
            int((pos[1] - self.lb_off[1]) / max(1e-6, self.lb_scale)),
        )

    def canvas_point(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Display position -> canvas coordinates, or None outside the canvas."""
        x, y = self._to_surface(pos)
        if not self.canvas_rect.collidepoint(x, y):
            return None
        return (x - self.canvas_rect.x, y - self.canvas_rect.y)

    def toggle_fullscreen(self) -> None:
        flags = self.display.get_flags()
        if flags & pygame.FULLSCREEN:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True

    def handle_resize(self, w: int, h: int) -> None:
        if not self.fullscreen:
            self.display = pygame.display.set_mode((w, h), self.surface_flags)

    def begin(self) -> None:
        """Paint the canvas as it currently stands and clear the status strip."""
        self.surface.fill(self.bg)
        self.canvas.compose(self.surface, self.canvas_rect.topleft)
        pygame.draw.line(self.surface, self.sel, self.status_rect.topleft, self.status_rect.topright, 2)

    def present(self) -> None:
        """Blit render surface to display with letterboxing (no stretch, aspect preserved)."""
        dw, dh = self.display.get_size()
        sw, sh = self.surface.get_size()
        scale = min(dw / sw, dh / sh)
        new_w = int(sw * scale)
        new_h = int(sh * scale)
        ox = max(0, (dw - new_w) // 2)
        oy = max(0, (dh - new_h) // 2)

        # Keep letterbox info for mouse unprojection.
        self.lb_off = (ox, oy)
        self.lb_scale = scale

        self.display.fill((0, 0, 0))
        if scale != 1.0:
            panel = pygame.transform.smoothscale(self.surface, (new_w, new_h))
        else:
            panel = self.surface
        self.display.blit(panel, (ox, oy))
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
