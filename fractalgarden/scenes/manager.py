# manager.py
from __future__ import annotations

import asyncio
from typing import List, Optional

import pygame

from fractalgarden import config
from fractalgarden.frames import RefreshScheduler
from fractalgarden.render.display import GardenRenderer
from fractalgarden.rng import new_rng

from .base import Scene


class SceneManager:
    def __init__(self, cfg: config.GardenConfig, renderer: GardenRenderer) -> None:
        self.cfg = cfg
        self.renderer = renderer
        self.scene_stack: List[Scene] = []
        # Frame-callback primitive handed to scenes that animate.
        self.refresh = RefreshScheduler()
        self.rng = new_rng(cfg.seed)

    def set_scene(self, scene: Optional[Scene]) -> None:
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    # ------------------------------------------------------------------ #

    async def run(self) -> None:
        """Main loop: drive the top scene until the stack is empty."""
        while self.scene_stack:
            await self._run_live_scene(self.scene_stack[-1])

    async def _run_live_scene(self, scene: Scene) -> None:
        renderer = self.renderer
        clock = pygame.time.Clock()
        frame_interval = 1.0 / max(1, self.cfg.fps)

        scene.enter(self)
        try:
            # Drive events/update/render until the scene stack changes or the
            # app is quit.
            while self.scene_stack and self.scene_stack[-1] is scene:
                dt = clock.tick()

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.set_scene(None)
                        return

                    if event.type == pygame.VIDEORESIZE:
                        renderer.handle_resize(event.w, event.h)
                        continue

                    # Global fullscreen toggle
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                        renderer.toggle_fullscreen()
                        continue

                    scene.handle_event(event, self)

                scene.update(dt, self)
                scene.render(renderer, self)
                # Display has refreshed; start any frames waiting on it.
                self.refresh.run_pending()

                if renderer.quit_requested:
                    renderer.quit_requested = False
                    self.set_scene(None)
                    return

                # Yield to the event loop so growing trees make progress.
                await asyncio.sleep(frame_interval)
        finally:
            scene.leave(self)
