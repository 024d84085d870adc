from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from termtris.ai import WeightedFitness
from termtris.game import Action, Game, GameConfig, TetrominoType
from termtris.visualization.colors import color_for_value
from termtris.visualization.text import format_game


class TetrisEnv(gym.Env):
    """Exposes the engine to an external trainer, one ``Action`` per step.

    Reward is the number of rows cleared by the step. When ``fitness`` is given,
    the change in its value over the locked cells is added as shaping.
    """

    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        fitness: Optional[WeightedFitness] = None,
        max_episode_steps: int = 10000,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.game = Game(config)
        self.render_mode = render_mode
        self.fitness = fitness
        self.max_episode_steps = int(max_episode_steps)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        self.observation_space = spaces.Box(
            low=0, high=len(TetrominoType), shape=(h, w), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))

        score_before = self.game.score
        fitness_before = self.fitness.evaluate(self.game.grid) if self.fitness else 0.0

        self.game.step(action)
        self._steps += 1

        reward_components: Dict[str, float] = {"lines": float(self.game.score - score_before)}
        if self.fitness is not None:
            reward_components["fitness"] = self.fitness.evaluate(self.game.grid) - fitness_before

        terminated = bool(self.game.over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))
        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[Any]:
        if self.render_mode == "ansi":
            return format_game(self.game)
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(grid[y, x])
            return img
        return None

    def close(self) -> None:
        pass
