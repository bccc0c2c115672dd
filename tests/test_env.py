import gymnasium as gym
import numpy as np
import pytest

import polyomino_bridge.env  # noqa: F401
from polyomino_bridge.env.bridge_env import PolyominoBridgeEnv
from polyomino_bridge.game import Action, GameConfig


@pytest.fixture
def env():
    e = PolyominoBridgeEnv(GameConfig(random_seed=5), render_mode="rgb_array")
    yield e
    e.close()


def test_registered_env_resets():
    e = gym.make("PolyominoBridge-v0")
    obs, info = e.reset(seed=0)
    assert e.observation_space.contains(obs)
    assert info["score"] == 0
    e.close()


def test_observation_matches_space(env):
    obs, _ = env.reset(seed=1)
    assert env.observation_space.contains(obs)
    assert obs["right_edge"].sum() == 0
    assert obs["piece"].sum() == env.game.config.first_piece_cells


def test_each_step_moves_one_row(env):
    env.reset(seed=2)
    y = env.game.position[1]
    obs, reward, terminated, truncated, info = env.step(int(Action.NONE))
    assert env.game.position[1] == y + 1
    assert reward == 0.0
    assert not terminated
    assert not truncated


def test_first_drop_rewards_piece_width(env):
    env.reset(seed=3)
    width = env.game.piece.width
    obs, reward, terminated, _, info = env.step(int(Action.DROP))
    assert not terminated
    assert reward == pytest.approx(float(width))
    assert info["accepted"] is True
    assert info["pieces_placed"] == 1
    assert obs["right_edge"].sum() >= 1
    assert env.observation_space.contains(obs)


def test_missed_drop_terminates(env):
    env.reset(seed=4)
    env.step(int(Action.DROP))
    env.game.position = (env.game.position[0], 100)
    _, reward, terminated, _, info = env.step(int(Action.DROP))
    assert terminated
    assert info["accepted"] is False
    assert reward == pytest.approx(env.terminal_penalty)


def test_truncates_after_max_steps():
    e = PolyominoBridgeEnv(GameConfig(random_seed=0), max_episode_steps=3)
    e.reset()
    truncated = False
    for _ in range(3):
        _, _, _, truncated, _ = e.step(int(Action.NONE))
    assert truncated


def test_render_rgb_array(env):
    env.reset(seed=6)
    env.step(int(Action.DROP))
    img = env.render()
    cfg = env.game.config
    assert isinstance(img, np.ndarray)
    assert img.shape == (cfg.lane_height * 12, cfg.view_columns * 12, 3)
    assert img.dtype == np.uint8


def test_config_larger_first_piece_than_mask_is_rejected():
    with pytest.raises(ValueError):
        PolyominoBridgeEnv(GameConfig(first_piece_cells=40, max_piece_cells=8))


def test_step_moves_one_row_even_with_leftover_clock(env):
    env.reset(seed=7)
    env.game.reverse = True
    for _ in range(3000):
        # Leftover time just under a period must not add an extra row.
        env.game.elapsed = env.game.period * 0.999999
        y = env.game.position[1]
        direction = env.game.direction
        _, _, terminated, truncated, _ = env.step(int(Action.NONE))
        assert not terminated
        moved = env.game.position[1] - y
        assert moved == direction
        if truncated:
            break
