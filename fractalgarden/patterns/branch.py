"""Recursive branch growth.

Each step waits for the configured delay, draws the motif of its node and
then grows two children side by side:

    child A: angle - spread, size * scale, motif + 1
    child B: angle + spread, size * scale, motif + 2

spread is drawn from [10, 60) degrees and scale from [0.7, 0.9) once per
step, so both children of a node share them but every generation redraws.
"""
from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from fractalgarden.patterns.motifs import MotifRenderer
from fractalgarden.patterns.palette import WHITE
from fractalgarden.rng import RNG, new_rng

if TYPE_CHECKING:
    from fractalgarden.config import FrameConfig
    from fractalgarden.render.canvas import Canvas
    from fractalgarden.state.seeds import SeedPoint

Vec2 = Tuple[float, float]

SKELETON_ALPHA = 0.5


@dataclass(frozen=True)
class BranchNode:
    x: float
    y: float
    size: float
    angle: float  # degrees
    motif_index: int
    depth_remaining: int

    @classmethod
    def from_seed(cls, point: "SeedPoint", config: "FrameConfig", motif_index: int) -> "BranchNode":
        return cls(
            x=point.x,
            y=point.y,
            size=config.seed_size,
            angle=point.angle,
            motif_index=motif_index % config.active_length,
            depth_remaining=max(0, config.depth),
        )

    def tip(self) -> Vec2:
        """End of this branch; screen y grows downward so sin is subtracted."""
        rad = math.radians(self.angle)
        return (self.x + self.size * math.cos(rad), self.y - self.size * math.sin(rad))


def spawn_children(node: BranchNode, rng: RNG, length: int) -> Tuple[BranchNode, BranchNode]:
    """Two children rooted at the tip of node."""
    tx, ty = node.tip()
    spread = rng.spread_degrees()
    size = node.size * rng.scale_factor()
    length = max(1, length)
    depth = node.depth_remaining - 1
    return (
        BranchNode(tx, ty, size, node.angle - spread, (node.motif_index + 1) % length, depth),
        BranchNode(tx, ty, size, node.angle + spread, (node.motif_index + 2) % length, depth),
    )


async def gather_or_cancel(*coros) -> List:
    """Await all coroutines; if any fails, cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


class BranchExpander:
    def __init__(
        self,
        canvas: "Canvas",
        rng: Optional[RNG] = None,
        motifs: Optional[MotifRenderer] = None,
    ) -> None:
        self.canvas = canvas
        self.rng = rng or new_rng()
        self.motifs = motifs or MotifRenderer()

    async def expand(self, node: BranchNode, config: "FrameConfig") -> int:
        """Grow node and all of its descendants; returns motifs drawn."""
        await asyncio.sleep(config.step_delay)
        if node.depth_remaining <= 0:
            return 0

        tip = node.tip()
        self.motifs.render(self.canvas, config.content_for(node.motif_index), node.x, node.y, node.size)
        if config.debug:
            self.canvas.draw_line(WHITE, (node.x, node.y), tip, SKELETON_ALPHA)

        left, right = spawn_children(node, self.rng, config.active_length)
        drawn = await gather_or_cancel(self.expand(left, config), self.expand(right, config))
        return 1 + sum(drawn)
