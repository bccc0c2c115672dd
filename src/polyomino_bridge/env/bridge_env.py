from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from polyomino_bridge.game import Action, BridgeGame, GameConfig, ScoringRules


BRIDGE_COLOR = (255, 165, 0)
PIECE_COLOR = (255, 255, 0)
BACKGROUND_COLOR = (147, 112, 219)


class PolyominoBridgeEnv(gym.Env):
    """Gymnasium wrapper around :class:`BridgeGame`.

    One env step applies an action and then moves the piece exactly one row;
    the wall-clock fall timer is not used.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 rules: Optional[ScoringRules] = None,
                 step_penalty: float = 0.0,
                 terminal_penalty: float = -1.0,
                 max_episode_steps: int = 5000) -> None:
        super().__init__()
        self.game = BridgeGame(config, rules)
        self.render_mode = render_mode

        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)
        self.max_episode_steps = int(max_episode_steps)

        cfg = self.game.config
        m = cfg.max_piece_cells
        lane = cfg.lane_height
        # Rows the right edge can occupy: a piece may sit up to m rows above or below the lane.
        self._row_offset = m
        self._rows = lane + 2 * m

        self.observation_space = spaces.Dict(
            {
                "piece": spaces.Box(low=0, high=1, shape=(m, m), dtype=np.int8),
                "piece_y": spaces.Box(low=-m, high=lane + m, shape=(1,), dtype=np.int32),
                "direction": spaces.Discrete(2),
                "right_edge": spaces.Box(low=0, high=1, shape=(self._rows,), dtype=np.int8),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        cfg = self.game.config
        m = cfg.max_piece_cells
        piece = self.game.piece.to_mask((m, m))
        edge = np.zeros((self._rows,), dtype=np.int8)
        for y in self.game.track.right_edge:
            row = y + self._row_offset
            if 0 <= row < self._rows:
                edge[row] = 1
        piece_y = int(np.clip(self.game.position[1], -m, cfg.lane_height + m))
        obs: Dict[str, Any] = {
            "piece": piece,
            "piece_y": np.array([piece_y], dtype=np.int32),
            "direction": 1 if self.game.direction == 1 else 0,
            "right_edge": edge,
        }
        return obs

    def _get_info(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {
            "score": self.game.score,
            "high_score": self.game.high_score,
            "pieces_placed": self.game.pieces_placed,
            "steps": self._steps,
        }
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.reset()
        self._steps = 0
        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        action = Action(int(action))

        _, gained, _, step_info = self.game.step(action)
        if not self.game.game_over:
            self.game.advance_row()
        self._steps += 1

        reward_components: Dict[str, float] = {
            "points": float(gained),
            "step": self.step_penalty,
        }
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))

        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        info["accepted"] = step_info.get("accepted")
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            cfg = self.game.config
            cell = 12
            shift = self.game.camera_shift()
            h, w = cfg.lane_height, cfg.view_columns
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            img[:, :] = BACKGROUND_COLOR

            def paint(cells, color) -> None:
                for x, y in cells:
                    col = x - shift
                    if 0 <= col < w and 0 <= y < h:
                        img[y * cell : (y + 1) * cell, col * cell : (col + 1) * cell, :] = color

            paint(self.game.bridge, BRIDGE_COLOR)
            px, py = self.game.position
            paint(self.game.piece.cells_at(px, py), PIECE_COLOR)
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass
