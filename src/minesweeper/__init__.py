"""
Minesweeper game package.

Provides board generation, the game engine with its reveal/flag rules,
and front ends for terminals and gymnasium agents.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    ADVANCED,
    LEVELS,
    DEFAULT_LEVEL,
    get_level,
)
from .generator import generate, board_from_mines
from .engine import (
    GameEngine,
    GameState,
    Outcome,
    RevealResult,
    FlagResult,
    GameSnapshot,
)
from .render import render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "ADVANCED",
    "LEVELS",
    "DEFAULT_LEVEL",
    "get_level",
    "generate",
    "board_from_mines",
    "GameEngine",
    "GameState",
    "Outcome",
    "RevealResult",
    "FlagResult",
    "GameSnapshot",
    "render_board",
    "MinesweeperEnv",
]
