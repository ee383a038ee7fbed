"""
Game driver: owns one board, tracks whose turn it is, and asks the solver
for the computer's moves.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import numpy as np

from .board import Board, Mark, Outcome
from .errors import GameOver
from .solver import best_move


class Mode(Enum):
    TWO_PLAYER = 1
    VS_COMPUTER = 2


class Game:
    def __init__(self, mode: Mode, human_mark: Mark = Mark.X, board: Optional[Board] = None) -> None:
        if human_mark is Mark.EMPTY:
            raise ValueError("human_mark must be X or O")
        self.mode = mode
        self.human_mark = human_mark
        self.board = board if board is not None else Board()
        self.turn = self.board.to_move()

    @property
    def computer_mark(self) -> Optional[Mark]:
        if self.mode is Mode.VS_COMPUTER:
            return self.human_mark.opponent()
        return None

    def reset(self) -> None:
        self.board.reset()
        self.turn = Mark.X

    def outcome(self) -> Outcome:
        return self.board.outcome()

    def is_over(self) -> bool:
        return self.board.winner() is not Mark.EMPTY or self.board.is_full()

    def is_computer_turn(self) -> bool:
        return self.mode is Mode.VS_COMPUTER and self.turn is not self.human_mark

    def play(self, index: int) -> None:
        """Place the current player's mark on ``index`` and pass the turn."""
        if self.is_over():
            raise GameOver(f"game already ended: {self.outcome().status.value}")
        self.board.place(index, self.turn)
        self.turn = self.turn.opponent()

    def play_computer(self, rng: Optional[np.random.Generator] = None) -> Optional[int]:
        """Let the computer move for the side to play. Returns the cell index, or None."""
        if self.is_over():
            logging.debug("game over; %s does not move", self.turn.name)
            return None
        mv = best_move(self.board, self.turn, self.turn.opponent(), rng=rng)
        if mv is None:
            logging.debug("no legal move for %s", self.turn.name)
            return None
        logging.debug("computer %s plays %d", self.turn.name, mv)
        self.play(mv)
        return mv
