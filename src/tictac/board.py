"""
Board model: marks, the 3x3 grid, win/draw detection.
Notes:
- Cells are addressed by (row, col) in [0, 2] or by linear index row*3 + col.
- Marks are 0=empty, 1=X, 2=O. X always starts.
- Under legal alternating play at most one line can be complete for each
  mark and never for both, so winner() does not resolve ambiguity.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from .errors import InvalidBoardString, InvalidCoordinate, OccupiedCell

SIZE = 3
CELLS = SIZE * SIZE

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
]


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self is Mark.EMPTY else self.name

    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opponent")


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Mark = Mark.EMPTY

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS


def to_index(row: int, col: int) -> int:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidCoordinate(f"cell ({row}, {col}) is outside the board")
    return row * SIZE + col


def to_row_col(index: int) -> Tuple[int, int]:
    if not 0 <= index < CELLS:
        raise InvalidCoordinate(f"index {index} is outside the board")
    return divmod(index, SIZE)


class Board:
    """A mutable 3x3 tic-tac-toe grid.

    The board only checks that placements land on empty cells inside the
    grid. Whose turn it is belongs to the caller.
    """

    def __init__(self, cells: Optional[List[Mark]] = None) -> None:
        if cells is None:
            self._cells = [Mark.EMPTY] * CELLS
        else:
            if len(cells) != CELLS:
                raise ValueError(f"expected {CELLS} cells, got {len(cells)}")
            self._cells = [Mark(c) for c in cells]

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        raw = raw.strip()
        if len(raw) != CELLS or any(c not in "012" for c in raw):
            raise InvalidBoardString(f"board must be 9 chars of 0/1/2, got {raw!r}")
        return cls([Mark(int(c)) for c in raw])

    def to_string(self) -> str:
        return ''.join(str(int(c)) for c in self._cells)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    @property
    def cells(self) -> Tuple[Mark, ...]:
        return tuple(self._cells)

    def copy(self) -> "Board":
        return Board(self._cells)

    def reset(self) -> None:
        for i in range(CELLS):
            self._cells[i] = Mark.EMPTY

    def get(self, row: int, col: int) -> Mark:
        return self._cells[to_index(row, col)]

    def set(self, row: int, col: int, mark: Mark) -> None:
        self.place(to_index(row, col), mark)

    def at(self, index: int) -> Mark:
        to_row_col(index)
        return self._cells[index]

    def place(self, index: int, mark: Mark) -> None:
        """Put ``mark`` on cell ``index``; placing EMPTY clears the cell."""
        to_row_col(index)
        mark = Mark(mark)
        if mark is not Mark.EMPTY and self._cells[index] is not Mark.EMPTY:
            raise OccupiedCell(f"cell {index} already holds {self._cells[index].name}")
        self._cells[index] = mark

    def clear(self, index: int) -> None:
        self.place(index, Mark.EMPTY)

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def winner(self) -> Mark:
        b = self._cells
        for a, c, d in WIN_PATTERNS:
            v = b[a]
            if v is not Mark.EMPTY and v == b[c] and v == b[d]:
                return v
        return Mark.EMPTY

    def outcome(self) -> Outcome:
        w = self.winner()
        if w is not Mark.EMPTY:
            return Outcome(Status.WIN, w)
        if self.is_full():
            return Outcome(Status.DRAW)
        return Outcome(Status.IN_PROGRESS)

    def counts(self) -> Tuple[int, int]:
        return self._cells.count(Mark.X), self._cells.count(Mark.O)

    def to_move(self) -> Mark:
        x, o = self.counts()
        return Mark.X if x == o else Mark.O

    def is_valid_state(self) -> bool:
        """True if the board can arise from legal play starting with X."""
        x_count, o_count = self.counts()
        if not (x_count == o_count or x_count == o_count + 1):
            return False
        w = self.winner()
        if w is Mark.X and x_count != o_count + 1:
            return False
        if w is Mark.O and x_count != o_count:
            return False

        def count_wins(p: Mark) -> int:
            return sum(1 for pat in WIN_PATTERNS if all(self._cells[i] is p for i in pat))
        if count_wins(Mark.X) > 0 and count_wins(Mark.O) > 0:
            return False
        return True
