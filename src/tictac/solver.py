"""
Exhaustive minimax for the computer player.
Scoring, from the computer's point of view:
- A computer win scores 10 - depth, a human win depth - 10, a draw 0.
- The depth shift makes the search prefer the quickest win and the slowest loss.
The search places and clears marks on the board it is given; every
placement is undone before the call that made it returns.
"""
import logging
from typing import Dict, List, Optional

import numpy as np

from .board import Board, Mark

WIN_SCORE = 10


def available_moves(board: Board) -> List[int]:
    return [i for i, v in enumerate(board.cells) if v is Mark.EMPTY]


def minimax(board: Board, depth: int, is_maximizing: bool, ai_mark: Mark, human_mark: Mark) -> int:
    w = board.winner()
    if w == ai_mark:
        return WIN_SCORE - depth
    if w == human_mark:
        return depth - WIN_SCORE
    if board.is_full():
        return 0

    mover = ai_mark if is_maximizing else human_mark
    best: Optional[int] = None
    for mv in available_moves(board):
        board.place(mv, mover)
        score = minimax(board, depth + 1, not is_maximizing, ai_mark, human_mark)
        board.clear(mv)
        if best is None or (score > best if is_maximizing else score < best):
            best = score
    return best  # type: ignore[return-value]


def _score_after(board: Board, mv: int, ai_mark: Mark, human_mark: Mark) -> int:
    board.place(mv, ai_mark)
    try:
        return minimax(board, 0, False, ai_mark, human_mark)
    finally:
        board.clear(mv)


def score_moves(board: Board, ai_mark: Mark, human_mark: Mark) -> Dict[int, int]:
    """Minimax score of every legal move for ``ai_mark``, in row-major order."""
    return {mv: _score_after(board, mv, ai_mark, human_mark) for mv in available_moves(board)}


def best_move(
    board: Board,
    ai_mark: Mark,
    human_mark: Mark,
    rng: Optional[np.random.Generator] = None,
) -> Optional[int]:
    """Pick the best move for ``ai_mark``, or None when the board has no empty cell.

    Candidates are shuffled before scoring and the first strictly best score
    wins, so ties are broken uniformly at random.
    """
    moves = available_moves(board)
    if not moves:
        return None
    if rng is None:
        rng = np.random.default_rng()
    candidates = [int(m) for m in rng.permutation(moves)]

    best_score: Optional[int] = None
    best: Optional[int] = None
    for mv in candidates:
        score = _score_after(board, mv, ai_mark, human_mark)
        logging.debug("candidate=%d score=%d", mv, score)
        if best_score is None or score > best_score:
            best_score = score
            best = mv
    logging.debug("best_move ai=%s move=%s score=%s", ai_mark.name, best, best_score)
    return best
