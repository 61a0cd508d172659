from typing import List, Optional, Sequence

import pytest

from fractalgarden.config import FrameConfig
from fractalgarden.errors import SurfaceError
from fractalgarden.rng import RNG


class SequenceRNG(RNG):
    """RNG whose random() cycles through fixed values."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = list(values)
        self.calls = 0
        super().__init__()

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class RecordingCanvas:
    def __init__(self, width: int = 400, height: int = 300, fail_at: Optional[int] = None) -> None:
        self.width = width
        self.height = height
        self.fail_at = fail_at  # motif attempt (0-based) that raises
        self.attempts = 0
        self.calls: List[tuple] = []

    @property
    def motifs(self) -> List[tuple]:
        return [c for c in self.calls if c[0] in ("glyph", "circle")]

    def _motif(self, call: tuple) -> None:
        attempt = self.attempts
        self.attempts += 1
        if attempt == self.fail_at:
            raise SurfaceError("canvas went away")
        self.calls.append(call)

    def clear(self, color) -> None:
        self.calls.append(("clear", color))

    def draw_glyph(self, text, x, y, size) -> None:
        self._motif(("glyph", text, x, y, size))

    def draw_circle(self, color, x, y, radius) -> None:
        self._motif(("circle", color, x, y, radius))

    def draw_line(self, color, start, end, alpha=1.0) -> None:
        self.calls.append(("line", color, start, end, alpha))

    def draw_text(self, text, x, y, size, color) -> None:
        self.calls.append(("text", text, x, y, size, color))


def frame_config(**kwargs) -> FrameConfig:
    values = dict(motifs=("A", "B"), motif_text="A,B", depth=2, step_delay=0.0)
    values.update(kwargs)
    return FrameConfig(**values)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def fixed_rng() -> SequenceRNG:
    # spread 20 degrees, scale 0.8
    return SequenceRNG([0.2, 0.5])
