"""Gymnasium environment for termtris."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Termtris-10x20-v0",
    entry_point="termtris.env.tetris_env:TetrisEnv",
)

__all__ = ["Termtris-10x20-v0"]
