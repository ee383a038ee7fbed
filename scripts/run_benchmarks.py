#!/usr/bin/env python3
from __future__ import annotations

import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from tictac.board import Board
from tictac.solver import best_move


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 5
    openings: Tuple[str, ...] = ("000000000", "000010000", "100020000")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    for raw in cfg.openings:
        board = Board.from_string(raw)
        ai = board.to_move()
        times: List[float] = []
        picks = set()
        for s in range(cfg.seeds):
            t0 = time.perf_counter()
            mv = best_move(board, ai, ai.opponent(), rng=np.random.default_rng(s))
            times.append(time.perf_counter() - t0)
            picks.add(mv)
        m, h = ci95(times)
        logging.info(
            "board=%s to_move=%s best_move mean=%.4fs ± %.4fs (95%% CI) picks=%s",
            raw,
            ai.name,
            m,
            h,
            sorted(picks),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
