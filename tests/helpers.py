from __future__ import annotations

from typing import Iterable, Sequence

from falling_blocks.game import GameGrid, TetrominoType


class ScriptedRandom:
    """Stands in for random.Random: ``choice`` returns the scripted types in order.

    Once the script runs out it keeps returning the last entry.
    """

    def __init__(self, kinds: Sequence[TetrominoType]) -> None:
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[min(self.calls, len(self.kinds) - 1)]
        self.calls += 1
        assert kind in seq
        return kind


def fill_rows(grid: GameGrid, rows: Iterable[int], value: int = 1, gaps: Iterable[int] = ()) -> None:
    """Fill whole rows of ``grid``, leaving the ``gaps`` columns empty."""
    gaps = set(gaps)
    for y in rows:
        for x in range(grid.width):
            if x not in gaps:
                grid.set_cell(x, y, value)
