from __future__ import annotations

import logging
from typing import Optional

import pygame

from fractalgarden.config import GardenConfig
from fractalgarden.frames import FrameOrchestrator
from fractalgarden.patterns.branch import BranchExpander
from fractalgarden.patterns.scheduler import TreeScheduler
from fractalgarden.state.seeds import SeedPointStore
from fractalgarden.ui.widgets import LabelWidget, TextFieldWidget, WidgetContext

from .base import Scene

logger = logging.getLogger(__name__)

ERROR_COLOR = (240, 120, 120)
CONTROLS_HELP = (
    "Click: add seed   A: animate   D: debug   M: motifs/shapes   "
    "Up/Down: depth   Tab: edit motifs   Backspace: clear all   F11: fullscreen   Esc: quit"
)


class GardenScene(Scene):
    """
    The interactive garden: seeds on a canvas, regrown every frame.

    Every settings change or click starts a new frame, which cancels the
    one still growing.
    """

    def __init__(self, cfg: GardenConfig) -> None:
        self.cfg = cfg
        self.store: Optional[SeedPointStore] = None
        self.frames: Optional[FrameOrchestrator] = None
        self.status = LabelWidget("")
        self.help = LabelWidget(CONTROLS_HELP)
        self.error = LabelWidget("", color=ERROR_COLOR)
        self.motif_field = TextFieldWidget(cfg.motif_text, label="Motifs:", on_submit=self._set_motifs)
        self.widgets = [self.status, self.help, self.error, self.motif_field]

    # ------------------------------------------------------------
    # Lifecycle

    def enter(self, manager) -> None:
        canvas = manager.renderer.canvas
        self.store = SeedPointStore(manager.rng)
        trees = TreeScheduler(BranchExpander(canvas, manager.rng))
        self.frames = FrameOrchestrator(
            canvas,
            self.store,
            trees,
            manager.refresh,
            self.cfg.snapshot,
            self.cfg.background,
        )
        self.regrow()

    def leave(self, manager) -> None:
        if self.frames is not None:
            self.frames.cancel()

    def regrow(self) -> None:
        """Re-seed an empty store and start a new frame."""
        canvas = self.frames.canvas
        self.store.initialize(self.cfg.fractal_count, canvas.width, canvas.height)
        self.frames.request_frame()

    # ------------------------------------------------------------
    # Controls

    def _set_motifs(self, text: str) -> None:
        self.cfg.motif_text = text
        logger.info("Motifs set to %r", text)
        self.regrow()

    def add_seed(self, x: float, y: float) -> None:
        self.store.append(x, y)
        self.frames.request_frame()

    def clear_all(self) -> None:
        self.store.clear()
        self.regrow()

    def _toggle(self, name: str) -> None:
        setattr(self.cfg, name, not getattr(self.cfg, name))
        logger.info("%s -> %s", name, getattr(self.cfg, name))
        self.regrow()

    def _change_depth(self, delta: int) -> None:
        before = self.cfg.depth
        if self.cfg.adjust_depth(delta) != before:
            self.regrow()

    def handle_event(self, event, manager) -> None:
        ctx = WidgetContext(surface=manager.renderer.surface, scene=self, renderer=manager.renderer)
        if self.motif_field.handle_event(event, ctx):
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            pos = manager.renderer.canvas_point(event.pos)
            if pos is not None:
                self.add_seed(*pos)
            return

        if event.type != pygame.KEYDOWN:
            return
        key = event.key
        if key == pygame.K_ESCAPE:
            manager.renderer.quit_requested = True
        elif key == pygame.K_a:
            self._toggle("animate")
        elif key == pygame.K_d:
            self._toggle("debug")
        elif key == pygame.K_m:
            self._toggle("use_motifs")
        elif key == pygame.K_UP:
            self._change_depth(1)
        elif key == pygame.K_DOWN:
            self._change_depth(-1)
        elif key == pygame.K_BACKSPACE:
            self.clear_all()
        elif key == pygame.K_TAB:
            self.motif_field.focus()

    # ------------------------------------------------------------
    # Drawing

    def _status_text(self) -> str:
        on = {True: "on", False: "off"}
        return (
            f"Seeds: {len(self.store)}   Depth: {self.cfg.depth}   "
            f"Animate: {on[self.cfg.animate]}   Debug: {on[self.cfg.debug]}   "
            f"Mode: {'motifs' if self.cfg.use_motifs else 'shapes'}   "
            f"Frame: {self.frames.phase.value}"
        )

    def render(self, renderer, manager) -> None:
        renderer.begin()
        ctx = WidgetContext(surface=renderer.surface, scene=self, renderer=renderer)
        strip = renderer.status_rect

        self.status.text = self._status_text()
        err = self.frames.last_error
        self.error.text = f"Last frame aborted: {err}" if err else ""

        for w in self.widgets:
            w.layout(ctx)
        self.status.rect.topleft = (strip.x + 12, strip.y + 8)
        self.help.rect.topleft = (strip.x + 12, strip.y + 8 + self.status.rect.height + 6)
        self.motif_field.rect.topright = (strip.right - 12, strip.y + 6)
        self.error.rect.topleft = (self.status.rect.right + 24, strip.y + 8)
        for w in self.widgets:
            w.draw(ctx)

        renderer.present()
