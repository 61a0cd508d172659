"""Grow one tree per seed point, all trees of a frame at once."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from fractalgarden.patterns.branch import BranchExpander, BranchNode, gather_or_cancel

if TYPE_CHECKING:
    from fractalgarden.config import FrameConfig
    from fractalgarden.state.seeds import SeedPoint

logger = logging.getLogger(__name__)


class TreeScheduler:
    def __init__(self, expander: BranchExpander) -> None:
        self.expander = expander

    async def expand_all(self, points: Sequence["SeedPoint"], config: "FrameConfig") -> int:
        """Resolve once every tree is fully grown; returns total motifs drawn.

        Tree i starts on motif i modulo the active list length. A failure
        in any tree cancels the others and propagates.
        """
        length = config.active_length
        roots = [BranchNode.from_seed(p, config, i % length) for i, p in enumerate(points)]
        if not roots:
            return 0
        drawn = await gather_or_cancel(*(self.expander.expand(r, config) for r in roots))
        total = sum(drawn)
        logger.debug("Grew %d trees, %d motifs", len(roots), total)
        return total
