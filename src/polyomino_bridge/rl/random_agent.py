from __future__ import annotations

import argparse

import gymnasium as gym

import polyomino_bridge.env  # noqa: F401
from polyomino_bridge.game import Action


def run_random(steps: int = 200, drop_chance: float = 0.1, seed: int | None = None) -> float:
    env = gym.make("PolyominoBridge-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    games = 0
    best = 0
    for _ in range(steps):
        # Mostly let the piece fall; rotate or drop now and then
        sample = env.action_space.sample()
        action = Action.DROP if env.np_random.random() < drop_chance else Action(int(sample))
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            games += 1
            best = max(best, int(info["score"]))
            obs, info = env.reset()
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} over {games} games, best score {best}")
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--drop_chance", type=float, default=0.1)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run_random(args.steps, args.drop_chance, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
