# fractalgarden/ui/widgets.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional
import pygame


@dataclass
class WidgetContext:
    """
    Lightweight context passed into widget methods.

    - surface: the logical surface the widget should draw into
    - scene:   the owning Scene (or None if not relevant)
    - renderer: the active GardenRenderer
    """
    surface: pygame.Surface
    scene: object | None
    renderer: object


class Widget:
    """
    Minimal base class for UI widgets: a rect in surface coordinates and
    overridable layout / draw / handle_event hooks.
    """

    def __init__(self) -> None:
        self.rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.visible: bool = True
        self.enabled: bool = True

    def layout(self, ctx: WidgetContext) -> None:
        """Size (and optionally place) self.rect for the current surface."""
        return None

    def draw(self, ctx: WidgetContext) -> None:
        return None

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        """
        Give this widget a chance to consume an event.
        Return True if the event is handled and should not propagate further.
        """
        return False


class LabelWidget(Widget):
    def __init__(
        self,
        text: str,
        *,
        color: Optional[tuple[int, int, int]] = None,
        font: Optional[pygame.font.Font] = None,
        padding: int = 0,
    ) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.font = font
        self.padding = padding

    def _font(self, ctx: WidgetContext) -> pygame.font.Font:
        return self.font or getattr(ctx.renderer, "small_font", getattr(ctx.renderer, "font"))

    def layout(self, ctx: WidgetContext) -> None:
        w, h = self._font(ctx).size(self.text)
        # rect.x/rect.y are chosen by the owner; only the size is computed here.
        self.rect.width = w + 2 * self.padding
        self.rect.height = h + 2 * self.padding

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        color = self.color or getattr(ctx.renderer, "fg", (255, 255, 255))
        text_surf = self._font(ctx).render(self.text, True, color)
        ctx.surface.blit(text_surf, (self.rect.x + self.padding, self.rect.y + self.padding))


class TextFieldWidget(Widget):
    """
    Single-line text entry. Focus it, type, Enter commits through
    on_submit(text), Esc restores the committed value.
    """

    def __init__(
        self,
        text: str = "",
        *,
        label: str = "",
        on_submit: Optional[Callable[[str], None]] = None,
        width: int = 360,
        padding: int = 4,
    ) -> None:
        super().__init__()
        self.text = text
        self.committed = text
        self.label = label
        self.on_submit = on_submit
        self.width = width
        self.padding = padding
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def layout(self, ctx: WidgetContext) -> None:
        font = getattr(ctx.renderer, "font")
        self.rect.width = self.width
        self.rect.height = font.get_height() + 2 * self.padding

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        font = getattr(ctx.renderer, "font")
        fg = getattr(ctx.renderer, "fg", (255, 255, 255))
        sel = getattr(ctx.renderer, "sel", (255, 255, 0))
        dim = getattr(ctx.renderer, "dim", (150, 150, 150))

        label_surf = font.render(self.label, True, dim)
        ctx.surface.blit(label_surf, (self.rect.x - label_surf.get_width() - 8, self.rect.y + self.padding))
        pygame.draw.rect(ctx.surface, (30, 30, 50), self.rect)
        pygame.draw.rect(ctx.surface, sel if self.focused else dim, self.rect, 1)

        shown = self.text + ("_" if self.focused else "")
        text_surf = font.render(shown, True, fg)
        ctx.surface.blit(text_surf, (self.rect.x + self.padding, self.rect.y + self.padding))

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        if not (self.visible and self.enabled):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            pos = getattr(ctx.renderer, "_to_surface")(event.pos)
            self.focused = self.rect.collidepoint(pos)
            return self.focused

        if not self.focused:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.focused = False
                self.committed = self.text
                if self.on_submit:
                    self.on_submit(self.text)
            elif event.key == pygame.K_ESCAPE:
                self.focused = False
                self.text = self.committed
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            return True
        if event.type == pygame.TEXTINPUT:
            self.text += event.text
            return True
        return False
