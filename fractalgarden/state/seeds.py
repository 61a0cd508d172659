from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from fractalgarden.rng import RNG, new_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedPoint:
    x: float
    y: float
    angle: float  # degrees, 0 = right, counter-clockwise on screen


class SeedPointStore:
    """Origins of the trees drawn every frame.

    Points are never edited in place; the store only grows by append and
    shrinks by clear.
    """

    def __init__(self, rng: Optional[RNG] = None) -> None:
        self.rng = rng or new_rng()
        self._points: List[SeedPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SeedPoint]:
        return iter(self.points)

    @property
    def points(self) -> Tuple[SeedPoint, ...]:
        return tuple(self._points)

    def initialize(self, count: int, width: float, height: float) -> int:
        """Scatter count random seeds over the bounds if the store is empty.

        Returns the number of points created (0 when already populated).
        """
        if self._points:
            return 0
        self._points = [
            SeedPoint(
                x=self.rng.random() * width,
                y=self.rng.random() * height,
                angle=self.rng.heading(),
            )
            for _ in range(max(0, count))
        ]
        logger.debug("Initialized %d seed points in %sx%s", len(self._points), width, height)
        return len(self._points)

    def append(self, x: float, y: float) -> SeedPoint:
        point = SeedPoint(x=float(x), y=float(y), angle=self.rng.heading())
        self._points.append(point)
        logger.debug("Added seed at (%.1f, %.1f) heading %.1f", point.x, point.y, point.angle)
        return point

    def clear(self) -> None:
        logger.debug("Cleared %d seed points", len(self._points))
        self._points = []
