from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .polyomino import Polyomino


@dataclass
class ScoringRules:
    base_period: float = 0.5
    reverse_chance: float = 0.5

    def points_for_piece(self, piece: Polyomino) -> int:
        return piece.width

    def period_for_score(self, score: int) -> float:
        # Falls speed up with the square root of the score.
        if score <= 0:
            raise ValueError(f"fall period is only defined for a positive score, got {score}")
        return self.base_period / math.sqrt(score)

    def next_piece_cells(self, rng: random.Random, min_cells: int, max_cells: int) -> int:
        return rng.randint(min_cells, max_cells)

    def next_reverse(self, rng: random.Random) -> bool:
        return rng.random() < self.reverse_chance


@dataclass
class ScoreBoard:
    """High score carried from one game to the next for the life of the process."""

    high_score: int = 0

    def commit(self, score: int) -> int:
        self.high_score = max(self.high_score, score)
        return self.high_score
