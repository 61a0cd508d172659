from __future__ import annotations

from typing import List, Tuple

Color = Tuple[int, int, int]


def hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# Shape-mode fill colours (wraps)
PALETTE: List[Color] = [
    hex_to_rgb("#FF6B6B"),
    hex_to_rgb("#4ECDC4"),
    hex_to_rgb("#45B7D1"),
    hex_to_rgb("#FED766"),
    hex_to_rgb("#2AB7CA"),
]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


def palette_color(index: int) -> Color:
    return PALETTE[index % len(PALETTE)]
