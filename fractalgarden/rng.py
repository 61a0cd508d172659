import random
from typing import Optional

SPREAD_MIN_DEG = 10.0
SPREAD_RANGE_DEG = 50.0
SCALE_MIN = 0.7
SCALE_RANGE = 0.2


class RNG(random.Random):
    """Random source for branch growth and seed placement.

    Every draw goes through random() so a subclass overriding only that
    method controls the whole growth sequence.
    """

    def spread_degrees(self) -> float:
        """Angular perturbation in [10, 60) degrees."""
        return SPREAD_MIN_DEG + self.random() * SPREAD_RANGE_DEG

    def scale_factor(self) -> float:
        """Child size multiplier in [0.7, 0.9)."""
        return SCALE_MIN + self.random() * SCALE_RANGE

    def heading(self) -> float:
        return self.random() * 360.0


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
