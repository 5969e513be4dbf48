"""
Unit tests for the terminal front end.
"""
import pytest
from minesweeper.terminal import TerminalGame


@pytest.fixture
def game(pair_engine) -> TerminalGame:
    """Terminal game on the 1x2 board with the mine at (0, 1)."""
    return TerminalGame(pair_engine)


class TestHandle:
    """Test command handling."""

    def test_reveal_prints_board(self, game: TerminalGame, capsys) -> None:
        """Reveal shows the number and the flag counter."""
        assert game.handle("r 0 0") is True
        out = capsys.readouterr().out
        assert "Flags left: 1" in out
        assert "  0  1  ." in out

    def test_flag_then_reveal_wins(self, game: TerminalGame, capsys) -> None:
        """Flagging the mine and clearing the rest announces a win."""
        game.handle("f 0 1")
        game.handle("r 0 0")
        assert "You win!" in capsys.readouterr().out
        assert game.engine.is_won is True

    def test_reveal_mine_announces_loss(
        self, game: TerminalGame, capsys
    ) -> None:
        """Hitting the mine prints the game over message."""
        game.handle("reveal 0 1")
        assert "You hit a mine" in capsys.readouterr().out

    def test_quit(self, game: TerminalGame) -> None:
        """q stops the loop."""
        assert game.handle("q") is False

    def test_blank_line_is_ignored(self, game: TerminalGame, capsys) -> None:
        assert game.handle("   ") is True
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize(
        "line, message",
        [
            ("r 5 5", "off the 1x2 board"),
            ("r 0", "Expected a row and a column"),
            ("f a b", "invalid literal"),
            ("l expert", "Unknown level"),
        ],
    )
    def test_bad_input_prints_error(
        self, game: TerminalGame, capsys, line: str, message: str
    ) -> None:
        """Input errors are reported and the game carries on."""
        assert game.handle(line) is True
        out = capsys.readouterr().out
        assert "Error:" in out
        assert message in out

    def test_unknown_command_prints_help(
        self, game: TerminalGame, capsys
    ) -> None:
        game.handle("x")
        assert "Commands:" in capsys.readouterr().out

    def test_new_game_resets(self, game: TerminalGame) -> None:
        """n starts over on the same level."""
        game.handle("f 0 0")
        game.handle("n")
        assert game.engine.remaining_flags == 1


class TestPlay:
    """Test the read loop."""

    def test_play_until_quit(self, game: TerminalGame, capsys) -> None:
        """Commands are read until q."""
        lines = iter(["f 0 1", "r 0 0", "q", "r 0 0"])
        game.play(lambda prompt: next(lines))
        assert game.engine.is_won is True
        assert "You win!" in capsys.readouterr().out

    def test_play_stops_at_end_of_input(self, game: TerminalGame) -> None:
        """EOF ends the loop quietly."""
        def read_line(prompt: str) -> str:
            raise EOFError

        game.play(read_line)
        assert game.engine.is_playing is True
