"""Text rendering of a board; empty cells show their 1-9 cell number."""
from .board import SIZE, Board, Mark, to_row_col


def render_board(board: Board) -> str:
    rows = []
    for r in range(SIZE):
        parts = []
        for c in range(SIZE):
            mark = board.get(r, c)
            parts.append(str(r * SIZE + c + 1) if mark is Mark.EMPTY else mark.symbol)
        rows.append(" " + " | ".join(parts))
    return "\n" + "\n-----------\n".join(rows) + "\n\n"


def cell_number(index: int) -> int:
    """Linear index 0-8 to the 1-9 number shown on the board."""
    to_row_col(index)
    return index + 1
