from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional, TextIO

import numpy as np

from .board import Board, Mark, Status
from .errors import InvalidBoardString
from .game import Game, Mode
from .render import cell_number, render_board
from .settings import Settings
from .solver import best_move, score_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictac", description="Tic-tac-toe in the terminal")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's tie-breaking (overrides TICTAC_SEED)",
    )

    sub.add_parser("play", help="Play an interactive game (default)")

    p_sol = sub.add_parser("solve", help="Show minimax scores and the computer's pick for a board")
    p_sol.add_argument(
        "--board",
        required=True,
        help="Board string, 9 digits 0=empty,1=X,2=O in row-major order, e.g. 110220000",
    )

    return p


def _read_line(inp: TextIO) -> str:
    line = inp.readline()
    if not line:
        raise EOFError
    return line.strip()


def _say(out: TextIO, text: str = "", end: str = "\n") -> None:
    out.write(text + end)
    out.flush()


def choose_mode(inp: TextIO, out: TextIO) -> Mode:
    while True:
        _say(out, "Choose mode:")
        _say(out, "1) Two players (local)")
        _say(out, "2) Play vs Computer (you choose X or O)")
        _say(out, "Enter 1 or 2: ", end="")
        text = _read_line(inp)
        if text == "1":
            return Mode.TWO_PLAYER
        if text == "2":
            return Mode.VS_COMPUTER
        _say(out, "Invalid option. Try again.")


def choose_mark(inp: TextIO, out: TextIO) -> Mark:
    while True:
        _say(out, "Do you want to play as X or O? (X goes first): ", end="")
        text = _read_line(inp).upper()
        if text == "X":
            return Mark.X
        if text == "O":
            return Mark.O
        _say(out, "Invalid choice. Enter X or O.")


def read_human_move(game: Game, inp: TextIO, out: TextIO) -> int:
    """Prompt until the player names an empty cell; returns its index 0-8."""
    while True:
        _say(out, f"Player {game.turn.symbol}, enter cell (1-9): ", end="")
        text = _read_line(inp)
        if not text:
            continue
        digits = text[1:] if text[0] in "+-" else text
        num = int(text) if digits.isascii() and digits.isdigit() else 0
        if num < 1 or num > 9:
            _say(out, "Invalid input. Type a number from 1 to 9 (shown on board). Try again.")
            continue
        idx = num - 1
        if game.board.at(idx) is not Mark.EMPTY:
            _say(out, "Cell already taken. Pick another.")
            continue
        return idx


def play_game(game: Game, inp: TextIO, out: TextIO, rng: Optional[np.random.Generator] = None) -> None:
    while True:
        _say(out, render_board(game.board), end="")
        if game.is_over():
            break
        if game.is_computer_turn():
            mark = game.turn
            mv = game.play_computer(rng)
            if mv is None:
                break
            _say(out, f"Computer ({mark.symbol}) plays cell {cell_number(mv)}")
        else:
            game.play(read_human_move(game, inp, out))

    result = game.outcome()
    if result.status is Status.WIN:
        _say(out, f"Winner: {result.winner.symbol}")
    else:
        _say(out, "It's a draw!")
    _say(out, "Thanks for playing.")


def run_play(settings: Settings, inp: TextIO, out: TextIO) -> int:
    try:
        mode = choose_mode(inp, out)
        if mode is Mode.VS_COMPUTER:
            human = choose_mark(inp, out)
            _say(out, f"You are {human.symbol}. Let's play!")
        else:
            human = Mark.X
            _say(out, "Two-player mode. X goes first.")
        game = Game(mode, human_mark=human)
        logging.debug("mode=%s human=%s seed=%s", mode.name, human.name, settings.seed)
        play_game(game, inp, out, rng=settings.rng())
    except EOFError:
        _say(out)
        logging.debug("Input closed; leaving the game")
    return 0


def run_solve(raw: str, settings: Settings) -> int:
    try:
        board = Board.from_string(raw)
    except InvalidBoardString:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return 2
    if not board.is_valid_state():
        logging.error("Board is not a valid reachable state.")
        return 2
    result = board.outcome()
    if result.is_terminal:
        winner = result.winner.name if result.status is Status.WIN else "-"
        logging.info("outcome=%s winner=%s", result.status.value, winner)
        return 0
    ai = board.to_move()
    scores = score_moves(board, ai, ai.opponent())
    mv = best_move(board, ai, ai.opponent(), rng=settings.rng())
    logging.info(
        "to_move=%s best=%s scores=%s",
        ai.name,
        mv,
        ' '.join(f"{i}:{s}" for i, s in scores.items()),
    )
    return 0


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    settings = Settings.resolve(seed=ns.seed, verbose=ns.verbose)
    logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            print(version("tictac"), file=stdout or sys.stdout)
        except PackageNotFoundError:
            print("unknown", file=stdout or sys.stdout)
        return 0

    if ns.cmd == "solve":
        return run_solve(ns.board, settings)

    return run_play(settings, stdin or sys.stdin, stdout or sys.stdout)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
