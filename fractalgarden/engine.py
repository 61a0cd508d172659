from __future__ import annotations

"""
Engine entry point: owns the window and runs the scene loop as a coroutine
so branch expansion and display refresh share one asyncio event loop.
"""

import asyncio
import logging

import pygame

from fractalgarden import config
from fractalgarden.render.display import GardenRenderer
from fractalgarden.scenes import GardenScene, SceneManager

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.GardenConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.renderer = GardenRenderer(cfg.view_width, cfg.view_height)
        self.manager = SceneManager(cfg, self.renderer)
        self.manager.set_scene(GardenScene(cfg))

    def run(self) -> None:
        logger.info("Starting garden %dx%d", self.cfg.view_width, self.cfg.view_height)
        try:
            asyncio.run(self.manager.run())
        finally:
            self.renderer.teardown()
