"""tictac package.

Board model, exhaustive minimax for an unbeatable computer player, a small
game driver, and an interactive terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, Mark, Outcome, Status
from .errors import GameOver, InvalidBoardString, InvalidCoordinate, OccupiedCell, TictacError
from .game import Game, Mode
from .solver import available_moves, best_move, minimax, score_moves

__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "Status",
    "Game",
    "Mode",
    "available_moves",
    "best_move",
    "minimax",
    "score_moves",
    "TictacError",
    "GameOver",
    "InvalidCoordinate",
    "OccupiedCell",
    "InvalidBoardString",
]
