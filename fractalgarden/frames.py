from __future__ import annotations

"""
Frame orchestration: one frame clears the canvas, regrows every tree from
the seed store, optionally stamps the debug line, and (when animating) asks
the host for another frame.

Only one frame chain is ever live. request_frame() cancels the running
frame and bumps the generation counter, so a continuation scheduled by an
older frame is ignored when the host finally runs it.
"""

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol

from fractalgarden.errors import SurfaceError
from fractalgarden.patterns.palette import BLACK, WHITE, Color
from fractalgarden.patterns.scheduler import TreeScheduler

if TYPE_CHECKING:
    from fractalgarden.config import FrameConfig
    from fractalgarden.render.canvas import Canvas
    from fractalgarden.state.seeds import SeedPointStore

logger = logging.getLogger(__name__)

OVERLAY_POS_Y = 30
OVERLAY_TEXT_SIZE = 20


class FramePhase(Enum):
    IDLE = "idle"
    CLEARING = "clearing"
    EXPANDING = "expanding"
    DEBUG_OVERLAY = "debug_overlay"
    SCHEDULED = "scheduled"


class FrameScheduler(Protocol):
    def schedule_next_frame(self, callback: Callable[[], None]) -> None: ...


class RefreshScheduler:
    """Callbacks queued for the next display refresh.

    The host loop calls run_pending() right after it flips the display.
    """

    def __init__(self) -> None:
        self._pending: List[Callable[[], None]] = []

    def __len__(self) -> int:
        return len(self._pending)

    def schedule_next_frame(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def run_pending(self) -> int:
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback()
        return len(callbacks)


def overlay_text(config: "FrameConfig", seed_count: int) -> str:
    return f"Input: {config.motif_text}, Fractals: {seed_count}, Depth: {config.depth}"


class FrameOrchestrator:
    def __init__(
        self,
        canvas: "Canvas",
        store: "SeedPointStore",
        trees: TreeScheduler,
        frame_scheduler: FrameScheduler,
        settings: Callable[[], "FrameConfig"],
        background: Color = BLACK,
    ) -> None:
        self.canvas = canvas
        self.store = store
        self.trees = trees
        self.frame_scheduler = frame_scheduler
        self.settings = settings
        self.background = background

        self.phase = FramePhase.IDLE
        self.generation = 0
        self.frames_completed = 0
        self.last_error: Optional[SurfaceError] = None
        self._task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------ #

    @property
    def busy(self) -> bool:
        return self._task is not None and not self._task.done()

    def request_frame(self) -> asyncio.Task:
        """Start a fresh frame, superseding whatever is in flight.

        Must be called with a running event loop.
        """
        self.generation += 1
        if self.busy:
            self._task.cancel()
        self._task = asyncio.ensure_future(self.run_frame(self.generation))
        self._task.add_done_callback(self._frame_done)
        return self._task

    def cancel(self) -> None:
        self.generation += 1
        if self.busy:
            self._task.cancel()
        self.phase = FramePhase.IDLE

    async def run_frame(self, generation: Optional[int] = None) -> int:
        """Run one full frame; returns motifs drawn.

        SurfaceError aborts the frame and is re-raised after being recorded.
        """
        if generation is None:
            generation = self.generation
        config = self.settings()
        points = self.store.points

        try:
            self._set_phase(generation, FramePhase.CLEARING)
            self.canvas.clear(self.background)

            self._set_phase(generation, FramePhase.EXPANDING)
            drawn = await self.trees.expand_all(points, config)

            if config.debug:
                self._set_phase(generation, FramePhase.DEBUG_OVERLAY)
                self.canvas.draw_text(
                    overlay_text(config, len(points)),
                    self.canvas.width / 2,
                    OVERLAY_POS_Y,
                    OVERLAY_TEXT_SIZE,
                    WHITE,
                )
        except SurfaceError as e:
            self.last_error = e
            self._set_phase(generation, FramePhase.IDLE)
            logger.error("Frame %d aborted: %s", generation, e)
            raise

        self.frames_completed += 1
        logger.debug("Frame %d done: %d seeds, %d motifs", generation, len(points), drawn)

        if config.animate and generation == self.generation:
            self.phase = FramePhase.SCHEDULED
            self.frame_scheduler.schedule_next_frame(lambda: self._continue(generation))
        else:
            self._set_phase(generation, FramePhase.IDLE)
        return drawn

    # ------------------------------------------------------------------ #

    def _set_phase(self, generation: int, phase: FramePhase) -> None:
        # A superseded frame must not overwrite the phase of its successor.
        if generation == self.generation:
            self.phase = phase

    def _continue(self, generation: int) -> None:
        if generation != self.generation:
            logger.debug("Dropping continuation of stale frame %d", generation)
            return
        self.request_frame()

    def _frame_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None and not isinstance(exc, SurfaceError):
            logger.error("Frame failed", exc_info=exc)
