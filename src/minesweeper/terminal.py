"""
Terminal front end for Minesweeper.

Translates typed commands into engine calls and prints the board
after each one.
"""
from typing import Callable, List

from .board import LEVELS
from .engine import GameEngine, Outcome
from .render import render_board


HELP = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   toggle a flag
  n           new game
  l LEVEL     change level ({levels})
  q           quit""".format(levels=", ".join(LEVELS))


class TerminalGame:
    """Interactive text loop around a GameEngine."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def show(self) -> None:
        """Print the flag counter and the board."""
        print(f"\nLevel: {self.engine.level} | "
              f"Flags left: {self.engine.remaining_flags}")
        print(render_board(self.engine.board))

    def handle(self, line: str) -> bool:
        """
        Run one command.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in ("q", "quit"):
            return False

        try:
            if command in ("r", "reveal"):
                self._reveal(args)
            elif command in ("f", "flag"):
                self._flag(args)
            elif command in ("n", "new"):
                self.engine.new_game()
                self.show()
            elif command in ("l", "level"):
                if len(args) != 1:
                    raise ValueError("Usage: l LEVEL")
                self.engine.change_level(args[0])
                self.show()
            else:
                print(HELP)
        except (ValueError, IndexError) as exc:
            print(f"Error: {exc}")
        return True

    def _reveal(self, args: List[str]) -> None:
        row, col = self._parse_position(args)
        result = self.engine.reveal(row, col)
        self.show()
        self._announce(result.outcome)

    def _flag(self, args: List[str]) -> None:
        row, col = self._parse_position(args)
        result = self.engine.toggle_flag(row, col)
        self.show()
        self._announce(result.outcome)

    @staticmethod
    def _parse_position(args: List[str]):
        if len(args) != 2:
            raise ValueError("Expected a row and a column")
        return int(args[0]), int(args[1])

    @staticmethod
    def _announce(outcome: Outcome) -> None:
        if outcome == Outcome.LOST:
            print("\n*** Game over! You hit a mine. ***")
        elif outcome == Outcome.WON:
            print("\n*** You win! ***")

    def play(self, read_line: Callable[[str], str] = input) -> None:
        """Read commands until the player quits or input runs out."""
        print(HELP)
        self.show()
        while True:
            try:
                line = read_line("> ")
            except EOFError:
                break
            if not self.handle(line):
                break
