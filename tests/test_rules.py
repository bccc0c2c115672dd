import math
import random

import pytest

from polyomino_bridge.game import Polyomino, ScoreBoard, ScoringRules


def test_points_are_piece_width():
    rules = ScoringRules()
    assert rules.points_for_piece(Polyomino([(0, 0), (1, 0), (2, 0)])) == 3
    assert rules.points_for_piece(Polyomino([(0, 0), (0, 1)])) == 1


def test_period_shrinks_with_score():
    rules = ScoringRules()
    assert rules.period_for_score(1) == pytest.approx(0.5)
    assert rules.period_for_score(4) == pytest.approx(0.25)
    assert rules.period_for_score(9) < rules.period_for_score(4)
    assert rules.period_for_score(7) == pytest.approx(0.5 / math.sqrt(7))


@pytest.mark.parametrize("score", [0, -1])
def test_period_undefined_for_non_positive_score(score):
    with pytest.raises(ValueError):
        ScoringRules().period_for_score(score)


def test_next_piece_cells_within_range():
    rng = random.Random(0)
    rules = ScoringRules()
    draws = {rules.next_piece_cells(rng, 4, 8) for _ in range(500)}
    assert draws == {4, 5, 6, 7, 8}


def test_reverse_chance_extremes():
    rng = random.Random(0)
    assert not any(ScoringRules(reverse_chance=0.0).next_reverse(rng) for _ in range(50))
    assert all(ScoringRules(reverse_chance=1.0).next_reverse(rng) for _ in range(50))


def test_scoreboard_keeps_maximum():
    board = ScoreBoard()
    assert board.commit(5) == 5
    assert board.commit(3) == 5
    assert board.commit(9) == 9
    assert board.high_score == 9
