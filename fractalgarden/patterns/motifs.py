"""Draw a single motif: a glyph or a palette-coloured disc."""
from __future__ import annotations

from typing import TYPE_CHECKING, Union

from fractalgarden.patterns.palette import palette_color

if TYPE_CHECKING:
    from fractalgarden.render.canvas import Canvas

MotifContent = Union[str, int]


class MotifRenderer:
    def render(self, canvas: "Canvas", content: MotifContent, x: float, y: float, size: float) -> None:
        """Paint one unit centred on (x, y).

        A string is drawn as a glyph at font size `size`; an int picks a
        palette colour for a disc of diameter `size`.
        """
        if isinstance(content, str):
            canvas.draw_glyph(content, x, y, size)
        else:
            canvas.draw_circle(palette_color(content), x, y, size / 2.0)
