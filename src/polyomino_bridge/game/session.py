from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .core import Action, BridgeGame, GameConfig
from .rules import ScoreBoard, ScoringRules


class Scene(IntEnum):
    TITLE = 0
    GAME = 1


class Session:
    """Title/Game state machine owning the high score for the whole run.

    The presentation layer asks for transitions (``start_game``, ``quit``) and
    forwards input and frame time; the session falls back to the title scene
    on its own when a game ends.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.scoreboard = ScoreBoard()
        self.scene = Scene.TITLE
        self.game: Optional[BridgeGame] = None
        self.last_score: Optional[int] = None
        self.running = True

    @property
    def high_score(self) -> int:
        return self.scoreboard.high_score

    def start_game(self) -> BridgeGame:
        if self.scene != Scene.TITLE:
            raise RuntimeError("a game is already in progress")
        if self.game is None:
            self.game = BridgeGame(self.config, self.rules, self.scoreboard)
        else:
            # Reuse the engine so its random stream carries on into the next game.
            self.game.reset()
        self.scene = Scene.GAME
        return self.game

    def _require_game(self) -> BridgeGame:
        if self.scene != Scene.GAME or self.game is None:
            raise RuntimeError("no game in progress")
        return self.game

    def handle(self, action: Action) -> None:
        game = self._require_game()
        if action == Action.ROTATE_LEFT:
            game.rotate_left()
        elif action == Action.ROTATE_RIGHT:
            game.rotate_right()
        elif action == Action.DROP:
            game.drop()
        self._check_game_over()

    def update(self, elapsed: float) -> None:
        if self.scene == Scene.GAME:
            self._require_game().tick(elapsed)
            self._check_game_over()

    def _check_game_over(self) -> None:
        game = self.game
        if game is not None and game.game_over:
            self.scoreboard.commit(game.score)
            self.last_score = game.score
            self.scene = Scene.TITLE

    def quit(self) -> None:
        self.running = False
