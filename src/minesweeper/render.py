"""
Text rendering of a board.
"""
from .board import Board
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


SYMBOLS = {
    HIDDEN_CODE: ".",
    FLAGGED_CODE: "F",
    MINE_CODE: "*",
    0: " ",
}


def render_board(board: Board) -> str:
    """
    Render board as an ASCII grid with row and column indices.

    Hidden cells show as ".", flags as "F", revealed mines as "*",
    empty cells as a blank and numbered cells as their count.
    """
    obs = board.get_observation()
    header = "   " + "".join(f"{col:>3}" for col in range(board.columns))
    lines = [header]

    for row in range(board.rows):
        row_str = f"{row:>3}"
        for col in range(board.columns):
            val = int(obs[row, col])
            row_str += f"{SYMBOLS.get(val, str(val)):>3}"
        lines.append(row_str)

    return "\n".join(lines)
