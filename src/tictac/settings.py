"""Runtime settings.

Environment-first, with command-line values taking precedence:
- TICTAC_SEED seeds the computer's tie-breaking RNG.
- TICTAC_LOG_LEVEL sets the default log level (e.g. INFO, DEBUG).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import numpy as np

SEED_ENV = "TICTAC_SEED"
LOG_LEVEL_ENV = "TICTAC_LOG_LEVEL"


def env_seed() -> int | None:
    raw = os.getenv(SEED_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", SEED_ENV, raw)
        return None


def env_log_level() -> int:
    name = (os.getenv(LOG_LEVEL_ENV) or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


@dataclass
class Settings:
    seed: int | None = None
    log_level: int = logging.INFO

    @classmethod
    def resolve(cls, seed: int | None = None, verbose: bool = False) -> "Settings":
        return cls(
            seed=seed if seed is not None else env_seed(),
            log_level=logging.DEBUG if verbose else env_log_level(),
        )

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
