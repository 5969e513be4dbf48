"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    Cell,
    GameEngine,
    board_from_mines,
)


EngineFactory = Callable[[int, int, Iterable[Tuple[int, int]]], GameEngine]


def build_engine(
    rows: int, columns: int, mines: Iterable[Tuple[int, int]]
) -> GameEngine:
    """Create an engine whose every game uses the given mine layout."""
    mines = set(mines)
    levels = {"custom": BoardConfig(columns, rows, len(mines))}
    return GameEngine(
        "custom",
        levels=levels,
        board_factory=lambda r, c, m, rng: board_from_mines(r, c, mines),
    )


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def make_engine() -> EngineFactory:
    """Factory for engines with a fixed mine layout."""
    return build_engine


@pytest.fixture
def corner_engine() -> GameEngine:
    """
    3x3 board with one mine in the top-left corner.

    Counts:
        * 1 0
        1 1 0
        0 0 0
    """
    return build_engine(3, 3, [(0, 0)])


@pytest.fixture
def pair_engine() -> GameEngine:
    """1x2 board with the mine at (0, 1)."""
    return build_engine(1, 2, [(0, 1)])


@pytest.fixture
def empty_engine() -> GameEngine:
    """2x2 board with no mines."""
    return build_engine(2, 2, [])


@pytest.fixture
def seeded_engine() -> GameEngine:
    """Beginner engine with a seeded random source."""
    return GameEngine("beginner", rng=random.Random(1234))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create an empty default 9x9 board."""
    return Board()


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with one mine at (0, 0)."""
    return board_from_mines(3, 3, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
