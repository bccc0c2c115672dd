"""Gymnasium environments for Polyomino Bridge."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="PolyominoBridge-v0",
    entry_point="polyomino_bridge.env.bridge_env:PolyominoBridgeEnv",
)

__all__ = ["PolyominoBridge-v0"]
