"""Global settings and defaults for the N-Queens search strategies.

This module centralizes tunable constants used by the strategies, the
reporting helpers and the benchmark pipeline. Values can be overridden at
runtime via the configuration loader in ``nqueens_search.cli.apply_configuration``.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

# Default budget (seconds) for the time-limited strategies
DEFAULT_TIME_LIMIT: float = 20.0

# Pause after each board printed by the debug tracer (seconds)
DEBUG_DELAY: float = 0.25

# Children derived per expanded board by the heuristic search
HEURISTIC_CHILDREN: int = 10

# Per-strategy time limits for benchmarks (None = no limit)
TIME_LIMITS: Dict[str, Optional[float]] = {
    "blind-naive": 20.0,
    "blind-intermediate": 20.0,
    "blind-advanced": 20.0,
    "completely-random": 20.0,
    "random-propagation": 20.0,
    "min-conflict": 20.0,
    "heuristic": 20.0,
}

# Strategies to benchmark (None = every registered strategy)
SELECTED_STRATEGIES: Optional[List[str]] = None

# Board sizes to benchmark (ascending)
N_VALUES: List[int] = [4, 6, 8, 10, 12]

# Independent runs per randomized strategy and N (blind searches run once)
RUNS_PER_STRATEGY: int = 5

# First seed of a benchmark; run i uses BASE_SEED + i
BASE_SEED: int = 0

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_search"

# When True, result and chart filenames carry the run datestamp
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")


def set_time_limits(default: Optional[float] = None, **per_strategy: Optional[float]) -> None:
    """Override the default and per-strategy time limits.

    Parameters
    - default: new ``DEFAULT_TIME_LIMIT`` (left unchanged when None).
    - per_strategy: strategy name (underscores allowed in place of dashes)
      mapped to its benchmark limit; None disables the limit.
    """
    global DEFAULT_TIME_LIMIT
    if default is not None:
        DEFAULT_TIME_LIMIT = float(default)
    for name, limit in per_strategy.items():
        TIME_LIMITS[name.replace("_", "-")] = limit
