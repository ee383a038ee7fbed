import numpy as np
import pytest

import tictac.solver as solver
from tictac.board import Board, Mark
from tictac.solver import available_moves, best_move, minimax, score_moves


def test_available_moves_row_major():
    assert available_moves(Board()) == list(range(9))
    assert available_moves(Board.from_string("100020001")) == [1, 2, 3, 5, 6, 7]
    assert available_moves(Board.from_string("112221121")) == []


def test_full_iff_no_moves():
    for raw in ("000000000", "112221121", "121212120", "111220000"):
        b = Board.from_string(raw)
        assert b.is_full() == (available_moves(b) == [])


def test_minimax_terminal_scores_shift_with_depth():
    x_won = Board.from_string("111220000")
    assert minimax(x_won, 0, True, Mark.X, Mark.O) == 10
    assert minimax(x_won, 3, False, Mark.X, Mark.O) == 7
    assert minimax(x_won, 3, True, Mark.O, Mark.X) == -7
    draw = Board.from_string("112221121")
    assert minimax(draw, 4, True, Mark.X, Mark.O) == 0


def test_minimax_restores_board():
    b = Board.from_string("120012000")
    before = b.to_string()
    minimax(b, 0, True, Mark.X, Mark.O)
    assert b.to_string() == before


def test_immediate_win_scores_ten():
    # X X _ / O O _ / _ _ _ with X to move
    b = Board.from_string("110220000")
    scores = score_moves(b, Mark.X, Mark.O)
    assert scores[2] == 10
    assert all(s < 10 for mv, s in scores.items() if mv != 2)
    for seed in range(5):
        assert best_move(b, Mark.X, Mark.O, rng=np.random.default_rng(seed)) == 2
    assert b.to_string() == "110220000"


def test_quickest_win_preferred_over_fork():
    # X O _ / _ X O / _ _ _ ; 8 wins now, 6 forks and wins two plies later
    b = Board.from_string("120012000")
    scores = score_moves(b, Mark.X, Mark.O)
    assert scores[8] == 10
    assert scores[6] == 8
    for seed in range(5):
        assert best_move(b, Mark.X, Mark.O, rng=np.random.default_rng(seed)) == 8


def test_blocks_opponent_line():
    # X X _ / _ O _ / _ _ _ ; O must take 2
    b = Board.from_string("110020000")
    assert best_move(b, Mark.O, Mark.X, rng=np.random.default_rng(0)) == 2
    scores = score_moves(b, Mark.O, Mark.X)
    assert scores[2] >= 0
    assert all(s == -9 for mv, s in scores.items() if mv != 2)


def test_best_move_returns_none_on_full_board():
    b = Board.from_string("112221121")
    assert best_move(b, Mark.X, Mark.O) is None
    assert score_moves(b, Mark.X, Mark.O) == {}


def test_ties_follow_shuffled_order(monkeypatch):
    monkeypatch.setattr(solver, "minimax", lambda *args: 0)
    b = Board()
    picks = set()
    for seed in range(30):
        expected = int(np.random.default_rng(seed).permutation(list(range(9)))[0])
        got = best_move(b, Mark.X, Mark.O, rng=np.random.default_rng(seed))
        assert got == expected
        picks.add(got)
    assert len(picks) > 1
    assert b.to_string() == "000000000"


def test_best_move_is_reproducible_with_seed(monkeypatch):
    monkeypatch.setattr(solver, "minimax", lambda *args: 0)
    b = Board.from_string("100020000")
    a = [best_move(b, Mark.X, Mark.O, rng=np.random.default_rng(7)) for _ in range(3)]
    assert len(set(a)) == 1


@pytest.mark.parametrize("raw,ai", [
    ("120012000", Mark.X),
    ("110020000", Mark.O),
    ("100020000", Mark.X),
])
def test_best_move_has_top_score(raw, ai):
    b = Board.from_string(raw)
    scores = score_moves(b, ai, ai.opponent())
    mv = best_move(b, ai, ai.opponent(), rng=np.random.default_rng(3))
    assert scores[mv] == max(scores.values())
    assert b.to_string() == raw
