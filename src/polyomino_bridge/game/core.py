from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .bridge import BridgeTrack, PlacementResult
from .polyomino import Coordinate, Polyomino, PolyominoGenerator
from .rules import ScoreBoard, ScoringRules


class Action(IntEnum):
    NONE = 0
    ROTATE_LEFT = 1
    ROTATE_RIGHT = 2
    DROP = 3


@dataclass
class GameConfig:
    lane_height: int = 10
    view_columns: int = 12
    first_piece_cells: int = 4
    min_piece_cells: int = 4
    max_piece_cells: int = 8
    initial_period: float = 0.4
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.lane_height <= 0:
            raise ValueError(f"lane_height must be positive, got {self.lane_height}")
        if self.view_columns <= 0:
            raise ValueError(f"view_columns must be positive, got {self.view_columns}")
        if self.first_piece_cells < 1:
            raise ValueError(f"first_piece_cells must be >= 1, got {self.first_piece_cells}")
        if not 1 <= self.min_piece_cells <= self.max_piece_cells:
            raise ValueError(
                f"piece cell range must satisfy 1 <= min <= max, got "
                f"{self.min_piece_cells}..{self.max_piece_cells}"
            )
        if self.first_piece_cells > self.max_piece_cells:
            raise ValueError(
                f"first_piece_cells ({self.first_piece_cells}) must not exceed "
                f"max_piece_cells ({self.max_piece_cells})"
            )
        if self.initial_period <= 0:
            raise ValueError(f"initial_period must be positive, got {self.initial_period}")


class BridgeGame:
    """One game: a piece falls beside the bridge until a drop misses it."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        scoreboard: Optional[ScoreBoard] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.scoreboard = scoreboard or ScoreBoard()
        self.rng = random.Random(self.config.random_seed)
        self.generator = PolyominoGenerator(self.rng)
        self.track = BridgeTrack()
        self.score = 0
        self.pieces_placed = 0
        self.game_over = False
        self.piece: Polyomino = Polyomino([(0, 0)])
        self.position: Coordinate = (0, 0)
        self.direction = 1
        self.period = self.config.initial_period
        self.reverse = False
        self.elapsed = 0.0
        self.reset()

    def reset(self) -> None:
        self.track.reset()
        self.score = 0
        self.pieces_placed = 0
        self.game_over = False
        self.piece = self.generator.generate(self.config.first_piece_cells)
        self.position = (0, -self.piece.height)
        self.direction = 1
        self.period = self.config.initial_period
        self.reverse = False
        self.elapsed = 0.0

    @property
    def high_score(self) -> int:
        return self.scoreboard.high_score

    @property
    def bridge(self):
        return self.track.cells

    def rotate_left(self) -> None:
        if not self.game_over:
            self.piece.rotate_left()

    def rotate_right(self) -> None:
        if not self.game_over:
            self.piece.rotate_right()

    def advance_row(self) -> None:
        """Move the piece one row in its current direction; the fall clock is untouched."""
        x, y = self.position
        y += self.direction
        lane = self.config.lane_height
        h = self.piece.height
        if (self.direction == -1 and y <= -h) or (self.direction == 1 and y >= lane):
            if self.reverse:
                self.direction *= -1
            else:
                # Leave through one end of the lane, come back through the other.
                y -= (h + lane) * self.direction
        self.position = (x, y)

    def tick(self, elapsed: float) -> int:
        """Feed ``elapsed`` seconds into the fall clock; return rows moved."""
        if elapsed < 0:
            raise ValueError(f"elapsed time must be >= 0, got {elapsed}")
        if self.game_over:
            return 0
        self.elapsed += elapsed
        rows = 0
        while self.elapsed > self.period:
            self.elapsed -= self.period
            self.advance_row()
            rows += 1
        return rows

    def drop(self) -> PlacementResult:
        if self.game_over:
            return PlacementResult(accepted=False)
        result = self.track.try_place(self.piece, self.position)
        if not result.accepted:
            self.game_over = True
            self.scoreboard.commit(self.score)
            return result

        placed = self.piece
        self.score += self.rules.points_for_piece(placed)
        self.pieces_placed += 1
        cells = self.rules.next_piece_cells(
            self.rng, self.config.min_piece_cells, self.config.max_piece_cells
        )
        self.piece = self.generator.generate(cells)
        self.position = self.track.next_origin(self.position, placed, self.piece.height)
        self.direction = 1
        self.period = self.rules.period_for_score(self.score)
        self.reverse = self.rules.next_reverse(self.rng)
        return result

    def camera_shift(self) -> int:
        """Columns to scroll left so the falling piece stays on screen."""
        right = self.position[0] + max(self.piece.width, self.piece.height)
        return max(0, right - self.config.view_columns)

    def step(self, action: Action, elapsed: float = 0.0) -> Tuple[dict, int, bool, dict]:
        if self.game_over:
            return self.get_state(), 0, True, {}

        score_before = self.score
        result: Optional[PlacementResult] = None
        if action == Action.ROTATE_LEFT:
            self.rotate_left()
        elif action == Action.ROTATE_RIGHT:
            self.rotate_right()
        elif action == Action.DROP:
            result = self.drop()
        elif action == Action.NONE:
            pass

        rows = self.tick(elapsed)
        reward = self.score - score_before
        info = {
            "score": self.score,
            "high_score": self.high_score,
            "pieces_placed": self.pieces_placed,
            "rows_moved": rows,
            "accepted": None if result is None else result.accepted,
        }
        return self.get_state(), reward, self.game_over, info

    def get_state(self) -> dict:
        return {
            "bridge": list(self.track.cells),
            "right_edge": self.track.right_edge,
            "piece": self.piece.points(),
            "piece_size": self.piece.size,
            "position": self.position,
            "direction": self.direction,
            "period": self.period,
            "score": self.score,
            "high_score": self.high_score,
            "game_over": self.game_over,
        }
