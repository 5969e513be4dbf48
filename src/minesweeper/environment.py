"""
Gymnasium environment wrapper for Minesweeper.

Exposes the game engine through the standard Env interface so that
scripted or learning players can drive it.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import DEFAULT_LEVEL
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .engine import GameEngine, Outcome
from .render import render_board


# Rewards
SAFE_CELL_REWARD = 1.0
CORRECT_FLAG_REWARD = 0.5
WIN_REWARD = 10.0
LOSS_REWARD = -10.0
NO_OP_REWARD = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * columns.
        Action i < rows * columns reveals cell (i // columns, i % columns);
        the upper half toggles a flag on cell i - rows * columns.

    Rewards:
        - +1 for every safe cell revealed (a flood counts each cell)
        - +0.5 for flagging a mine, -0.5 for flagging a safe cell
          (signs flip when the flag is removed)
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        level: str = DEFAULT_LEVEL,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            level: Name of the difficulty level to play.
            render_mode: How to render the environment.
        """
        super().__init__()

        self._rng = random.Random()
        self.engine = GameEngine(level, rng=self._rng)
        self.config = self.engine.config
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )

        # One reveal and one flag action per cell
        self._num_cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._num_cells)

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
        # Board layout follows the env's own seeded generator
        self._rng.seed(int(self.np_random.integers(2**32)))
        self.engine.new_game()
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col, is_flag = self._decode_action(action)
        self._steps += 1

        if is_flag:
            reward = self._flag_reward(row, col)
        else:
            reward = self._reveal_reward(row, col)

        observation = self.engine.get_observation()
        terminated = self.engine.is_game_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[int, int, bool]:
        """Convert flat action index to (row, col, is_flag)."""
        action = int(action)
        is_flag = action >= self._num_cells
        cell_index = action - self._num_cells if is_flag else action
        row, col = divmod(cell_index, self.config.columns)
        return row, col, is_flag

    def _reveal_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the result."""
        result = self.engine.reveal(row, col)

        if not result.affected_cells:
            return NO_OP_REWARD
        if result.outcome == Outcome.LOST:
            return LOSS_REWARD

        reward = SAFE_CELL_REWARD * len(result.affected_cells)
        if result.outcome == Outcome.WON:
            reward += WIN_REWARD
        return reward

    def _flag_reward(self, row: int, col: int) -> float:
        """Toggle a flag and score the result."""
        cell = self.engine.get_cell(row, col)
        if self.engine.is_game_over or cell.is_revealed:
            return NO_OP_REWARD

        result = self.engine.toggle_flag(row, col)
        reward = CORRECT_FLAG_REWARD if cell.is_mine else -CORRECT_FLAG_REWARD
        if not result.flagged:
            reward = -reward
        if result.outcome == Outcome.WON:
            reward += WIN_REWARD
        return reward

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.engine.cells_revealed,
            "total_safe": self.config.safe_cells,
            "remaining_flags": self.engine.remaining_flags,
            "game_state": self.engine.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.engine.board)
        if self.render_mode == "human":
            print(render_board(self.engine.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Hidden cells can be
            revealed; any cell not yet revealed can take a flag toggle.
        """
        obs = self.engine.get_observation().flatten()
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.engine.is_game_over:
            return mask
        mask[:self._num_cells] = obs == HIDDEN_CODE
        mask[self._num_cells:] = (obs == HIDDEN_CODE) | (obs == FLAGGED_CODE)
        return mask
