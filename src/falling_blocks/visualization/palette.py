from __future__ import annotations

from typing import Dict, Tuple

from falling_blocks.game import COLORS, GHOST_CELL


RGB = Tuple[int, int, int]


def _hex_to_rgb(color: str) -> RGB:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


PALETTE: Dict[int, RGB] = {
    0: (20, 20, 26),
    GHOST_CELL: (70, 70, 84),
    **{int(kind): _hex_to_rgb(hex_color) for kind, hex_color in COLORS.items()},
}


def color_for_value(v: int) -> RGB:
    return PALETTE.get(int(v), (200, 200, 200))
