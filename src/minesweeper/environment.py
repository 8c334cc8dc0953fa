"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so agents can play the minefield.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .commands import Action
from .minefield import BoardConfig, Minefield


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = mine (only after an explosion)

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size reveals cell (i // size, i % size);
        the second half marks cell ((i - size * size) // size, i % size).

    Rewards:
        - +1 for an action that changed the field
        - +10 for solving the field
        - -10 for hitting a mine
        - -0.1 for an action with no effect
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Field configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.minefield = Minefield(self.config)
        self.render_mode = render_mode

        size = self.config.size
        self._cells = size * size

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        placement_seed = int(self.np_random.integers(2**31))
        self.minefield = Minefield(
            self.config, _rng=random.Random(placement_seed)
        )
        self._steps = 0

        return self.minefield.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col, kind = self.decode_action(action)
        self._steps += 1

        changed = self.minefield.handle_action(row, col, kind)
        reward = self._calculate_reward(changed)

        observation = self.minefield.get_observation()
        terminated = not self.minefield.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, Action]:
        """Convert flat action index to (row, col, action)."""
        action = int(action)
        if action < self._cells:
            kind = Action.REVEAL
        else:
            kind = Action.MARK
            action -= self._cells
        row, col = divmod(action, self.config.size)
        return row, col, kind

    def _calculate_reward(self, changed: bool) -> float:
        """Reward for the action just applied."""
        if not changed:
            return -0.1
        if self.minefield.solved:
            return 10.0
        if self.minefield.exploded:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "hidden": self.minefield.hidden_count(),
            "marked": self.minefield.marked_count(),
            "game_state": self.minefield.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current field."""
        if self.render_mode == "ansi":
            return self.minefield.render()
        if self.render_mode == "human":
            print(self.minefield.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the field.

        Returns:
            int8 array where 1 = valid action, usable with
            ``action_space.sample(mask=...)``.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not self.minefield.is_playing:
            return mask
        for row, col in self.minefield.get_valid_actions():
            index = row * self.config.size + col
            mask[index] = 1
            mask[self._cells + index] = 1
        return mask
