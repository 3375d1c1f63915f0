# timebench/config.py
#
# Settings for the command-line driver, read from TIMEBENCH_* environment
# variables. The timing core itself takes no configuration.

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_ARRAY_SIZE = 1_000
DEFAULT_RUNS = (1, 2, 4, 8, 16)


def _int_from_env(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _runs_from_env(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        runs = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        raise ValueError(f"{name} must be a comma-separated list of integers, got {raw!r}") from None
    if not runs:
        raise ValueError(f"{name} must name at least one run count")
    return runs


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    array_size: int = DEFAULT_ARRAY_SIZE
    runs: Tuple[int, ...] = DEFAULT_RUNS
    seed: Optional[int] = None

    @classmethod
    def from_env(cls):
        """Builds Settings from the environment, falling back to defaults."""
        return cls(
            log_level=os.getenv("TIMEBENCH_LOG_LEVEL", "INFO"),
            log_file=os.getenv("TIMEBENCH_LOG_FILE") or None,
            array_size=_int_from_env("TIMEBENCH_ARRAY_SIZE", DEFAULT_ARRAY_SIZE),
            runs=_runs_from_env("TIMEBENCH_RUNS", DEFAULT_RUNS),
            seed=_int_from_env("TIMEBENCH_SEED", None),
        )
