"""Error types raised by the board model."""


class TictacError(Exception):
    """Base class for tictac errors."""


class InvalidCoordinate(TictacError, IndexError):
    """Row, column or linear index outside the 3x3 grid."""


class OccupiedCell(TictacError, ValueError):
    """A mark was placed on a cell that already holds one."""


class InvalidBoardString(TictacError, ValueError):
    """A board string is not 9 characters of 0/1/2."""


class GameOver(TictacError):
    """A move was attempted after the game reached a win or a draw."""
