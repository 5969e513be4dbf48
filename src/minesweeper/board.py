"""
Board module for Minesweeper.

Holds the board configuration, the three difficulty presets and the
grid of cells with its neighbor utilities. Mine placement lives in
the generator module; game rules live in the engine.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def rows(self) -> int:
        return self.height

    @property
    def columns(self) -> int:
        return self.width

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to clear the board."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(width=9, height=9, num_mines=10)
INTERMEDIATE = BoardConfig(width=16, height=16, num_mines=40)
ADVANCED = BoardConfig(width=30, height=16, num_mines=99)

LEVELS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "advanced": ADVANCED,
}

DEFAULT_LEVEL = "beginner"


def get_level(
    name: str, levels: Optional[Dict[str, BoardConfig]] = None
) -> BoardConfig:
    """
    Resolve a level name to its board configuration.

    Raises:
        ValueError: If the name is not one of the known levels.
    """
    levels = LEVELS if levels is None else levels
    try:
        return levels[name]
    except KeyError:
        known = ", ".join(sorted(levels))
        raise ValueError(
            f"Unknown level {name!r} (expected one of: {known})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of cells for one game.

    The board only stores cells and answers positional questions;
    it never changes cell content on its own.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._grid:
            self._grid = [
                [Cell() for _ in range(self.config.width)]
                for _ in range(self.config.height)
            ]

    @property
    def rows(self) -> int:
        return self.config.height

    @property
    def columns(self) -> int:
        return self.config.width

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 neighbors on the board.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    # ========================================================================
    # Accessors
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.columns):
                yield row, col

    def mine_positions(self) -> List[Position]:
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, columns) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.columns), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs
