from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Indexed by rows cleared in a single lock, multiplied by the level
    line_clear_scores: tuple[int, int, int, int, int] = (0, 100, 300, 500, 800)
    soft_drop_score: int = 1
    lines_per_level: int = 10

    def score_for_lines(self, lines: int, level: int) -> int:
        if not 0 <= lines < len(self.line_clear_scores):
            raise ValueError(f"Cannot score {lines} rows cleared at once")
        return self.line_clear_scores[lines] * level

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1
