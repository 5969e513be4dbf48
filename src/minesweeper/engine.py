"""
Game engine for Minesweeper.

Owns the board of the current game together with the counters the
win condition is built on, and applies reveal and flag actions.
"""
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, DEFAULT_LEVEL, LEVELS, get_level
from .cell import Cell, CellState
from .generator import generate


BoardFactory = Callable[[int, int, int, Optional[random.Random]], Board]
AffectedCell = Tuple[int, int, CellState]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Outcome(Enum):
    """What a single action did to the game."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Action Results
# ============================================================================

@dataclass(frozen=True)
class RevealResult:
    """
    Result of a reveal action.

    Attributes:
        outcome: Whether the game goes on, was won or was lost.
        affected_cells: (row, col, new state) for every cell whose state
            changed, in the order they changed.
    """

    outcome: Outcome = Outcome.CONTINUE
    affected_cells: List[AffectedCell] = field(default_factory=list)


@dataclass(frozen=True)
class FlagResult:
    """Result of a flag toggle."""

    flagged: bool
    remaining_flags: int
    outcome: Outcome = Outcome.CONTINUE


@dataclass(frozen=True)
class GameSnapshot:
    """Summary of a freshly started game for the display layer."""

    level: str
    rows: int
    columns: int
    num_mines: int
    remaining_flags: int


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Rules and state of one Minesweeper session.

    A game is won once every safe cell is revealed and every mine
    carries a flag. Revealing a mine loses it. Both outcomes are
    terminal until new_game() or change_level() is called.
    """

    def __init__(
        self,
        level: str = DEFAULT_LEVEL,
        rng: Optional[random.Random] = None,
        levels: Optional[Dict[str, BoardConfig]] = None,
        board_factory: BoardFactory = generate,
    ) -> None:
        """
        Initialize the engine and start a first game.

        Args:
            level: Name of the starting level.
            rng: Random source handed to the board factory on every new
                game (default: unseeded).
            levels: Level table to resolve names against (default: the
                three presets).
            board_factory: Callable building a board from rows, columns,
                mine count and rng.
        """
        self._levels = LEVELS if levels is None else levels
        self._rng = rng or random.Random()
        self._board_factory = board_factory
        self._level = level
        self.config = get_level(level, self._levels)
        self._reset()

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def _reset(self) -> None:
        """Discard the current game and generate a fresh board."""
        self._board = self._board_factory(
            self.config.rows, self.config.columns, self.config.num_mines,
            self._rng,
        )
        self._game_state = GameState.PLAYING
        self._remaining_flags = self.config.num_mines
        self._cells_revealed = 0
        self._correct_flags = 0

    def new_game(self) -> GameSnapshot:
        """Start a new game on the current level."""
        self._reset()
        return self.snapshot()

    def change_level(self, level: str) -> GameSnapshot:
        """
        Switch level and start a new game on it.

        Raises:
            ValueError: If the level name is unknown. The running game is
                left untouched in that case.
        """
        self.config = get_level(level, self._levels)
        self._level = level
        return self.new_game()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            level=self._level,
            rows=self.config.rows,
            columns=self.config.columns,
            num_mines=self.config.num_mines,
            remaining_flags=self._remaining_flags,
        )

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell.

        A mine loses the game and uncovers every mine. A cell with no
        adjacent mines flood-fills its region. Revealed or flagged cells
        and finished games are left alone.

        Raises:
            IndexError: If the position is off the board.
        """
        cell = self._require_cell(row, col)
        if self.is_game_over or not cell.is_hidden:
            return RevealResult()

        if cell.is_mine:
            return self._detonate()

        if cell.adjacent_mines == 0:
            affected = self._flood_reveal(row, col)
        else:
            cell.reveal()
            self._cells_revealed += 1
            affected = [(row, col, cell.state)]

        if self.check_win():
            self._game_state = GameState.WON
            return RevealResult(Outcome.WON, affected)
        return RevealResult(Outcome.CONTINUE, affected)

    def _detonate(self) -> RevealResult:
        """Lose the game and show every mine."""
        self._cells_revealed += 1
        self._game_state = GameState.LOST
        affected = []
        for mine_row, mine_col in self._board.mine_positions():
            mine = self._board.get_cell(mine_row, mine_col)
            mine.detonate()
            affected.append((mine_row, mine_col, mine.state))
        return RevealResult(Outcome.LOST, affected)

    def _flood_reveal(self, row: int, col: int) -> List[AffectedCell]:
        """
        Reveal the empty region around (row, col) and its numbered border.

        Flagged cells are skipped even when safe. A cell is queued only
        while hidden and revealed at most once.
        """
        affected = []
        queue = deque([(row, col)])
        while queue:
            current_row, current_col = queue.popleft()
            cell = self._board.get_cell(current_row, current_col)
            if not cell.reveal():
                continue
            self._cells_revealed += 1
            affected.append((current_row, current_col, cell.state))

            if cell.adjacent_mines > 0:
                continue
            for neighbor_row, neighbor_col in self._board.get_neighbors(
                current_row, current_col
            ):
                if self._board.get_cell(neighbor_row, neighbor_col).is_hidden:
                    queue.append((neighbor_row, neighbor_col))
        return affected

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Place or remove a flag.

        Revealed cells cannot be flagged. Removing a flag from a mine
        takes it back out of the correct-flag count.

        Raises:
            IndexError: If the position is off the board.
        """
        cell = self._require_cell(row, col)
        if self.is_game_over or not cell.toggle_flag():
            return FlagResult(cell.is_flagged, self._remaining_flags)

        if cell.is_flagged:
            self._remaining_flags -= 1
            if cell.is_mine:
                self._correct_flags += 1
        else:
            self._remaining_flags += 1
            if cell.is_mine:
                self._correct_flags -= 1

        outcome = Outcome.CONTINUE
        if self.check_win():
            self._game_state = GameState.WON
            outcome = Outcome.WON
        return FlagResult(cell.is_flagged, self._remaining_flags, outcome)

    def check_win(self) -> bool:
        """Check that all safe cells are revealed and all mines flagged."""
        return (
            self._cells_revealed == self.config.safe_cells
            and self._correct_flags == self.config.num_mines
        )

    def _require_cell(self, row: int, col: int) -> Cell:
        cell = self._board.get_cell(row, col)
        if cell is None:
            raise IndexError(
                f"Position ({row}, {col}) is off the "
                f"{self.config.rows}x{self.config.columns} board"
            )
        return cell

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def level(self) -> str:
        return self._level

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_game_over(self) -> bool:
        """Check if the game reached a terminal state."""
        return self._game_state != GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    @property
    def remaining_mines(self) -> int:
        return self.config.num_mines

    @property
    def remaining_flags(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self._remaining_flags

    @property
    def cells_revealed(self) -> int:
        return self._cells_revealed

    @property
    def correct_flags(self) -> int:
        return self._correct_flags

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._board.get_cell(row, col)

    def get_observation(self) -> np.ndarray:
        """Current board as an int8 array (see Board.get_observation)."""
        return self._board.get_observation()
