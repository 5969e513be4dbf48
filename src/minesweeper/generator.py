"""
Board generation for Minesweeper.

Places mines by rejection sampling and fills in the adjacent-mine
count of every safe cell.
"""
import random
from typing import Iterable, Optional

from .board import Board, BoardConfig, Position


def generate(
    rows: int,
    columns: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a fully populated board.

    Picks uniformly random cells until ``mine_count`` distinct ones hold
    a mine. The expected number of draws stays close to ``mine_count``
    while the board is sparse; the presets keep density under a third.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        mine_count: Mines to place, ``0 <= mine_count < rows * columns``.
        rng: Random source. Defaults to an unseeded ``random.Random``;
            pass a seeded one for reproducible boards.

    Returns:
        New board with every cell hidden.

    Raises:
        ValueError: If the dimensions or mine count are out of range.
    """
    rng = rng or random.Random()
    board = Board(BoardConfig(width=columns, height=rows, num_mines=mine_count))
    _place_mines(board, rng)
    _calculate_adjacent_mines(board)
    return board


def board_from_mines(
    rows: int, columns: int, mines: Iterable[Position]
) -> Board:
    """
    Build a board with mines at fixed positions.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        mines: (row, col) positions of the mines; duplicates collapse.

    Raises:
        ValueError: If a mine lies off the board or there are too many.
    """
    mines = set(mines)
    board = Board(BoardConfig(width=columns, height=rows, num_mines=len(mines)))
    for row, col in mines:
        cell = board.get_cell(row, col)
        if cell is None:
            raise ValueError(f"Mine position ({row}, {col}) is off the board")
        cell.is_mine = True
    _calculate_adjacent_mines(board)
    return board


def _place_mines(board: Board, rng: random.Random) -> None:
    """Mark ``num_mines`` distinct random cells as mines."""
    mines_to_place = board.config.num_mines
    while mines_to_place > 0:
        cell = board.get_cell(
            rng.randrange(board.rows), rng.randrange(board.columns)
        )
        if not cell.is_mine:
            cell.is_mine = True
            mines_to_place -= 1


def _calculate_adjacent_mines(board: Board) -> None:
    """Calculate adjacent mine counts for all safe cells."""
    for row, col in board.positions():
        cell = board.get_cell(row, col)
        if not cell.is_mine:
            cell.adjacent_mines = board.count_adjacent_mines(row, col)
