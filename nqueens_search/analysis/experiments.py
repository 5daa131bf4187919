"""Sequential benchmark runner for the search strategies.

For each board size, every selected strategy runs either once (blind
searches, which are deterministic) or ``runs`` times with seeds
``base_seed + run`` (randomized strategies). Per-run records are grouped into
outcome statistics suitable for CSV export and plotting.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .. import settings
from ..strategies import RANDOMIZED, STRATEGIES, run_strategy
from ..utils import is_valid_solution
from .stats import BenchmarkResults, ProgressPrinter, RunRecord, compute_grouped_statistics

logger = logging.getLogger(__name__)


def run_single(
    strategy: str,
    n: int,
    seed: Optional[int],
    time_limit: Optional[float],
    validate: bool = False,
) -> RunRecord:
    """Run one strategy once and shape the outcome as a ``RunRecord``."""
    result = run_strategy(strategy, n, seed=seed, time_limit=time_limit)
    if validate and result.found:
        if result.board is None or not is_valid_solution(result.board.queens, n):
            raise AssertionError(f"Invalid solution produced for N={n} by {strategy}: {result.board!r}")

    record: RunRecord = {
        "success": result.found,
        "timeout": result.timed_out,
        "time": result.elapsed or 0.0,
        "configurations": result.configurations,
    }
    if result.local_optimums is not None:
        record["local_optimums"] = result.local_optimums
    if result.steps is not None:
        record["steps"] = result.steps
    if result.seed is not None:
        record["seed"] = result.seed
    return record


def run_experiments(
    n_values: List[int],
    strategies: Optional[List[str]] = None,
    runs: Optional[int] = None,
    base_seed: Optional[int] = None,
    time_limits: Optional[Dict[str, Optional[float]]] = None,
    validate: bool = False,
    progress_label: Optional[str] = None,
) -> BenchmarkResults:
    """Benchmark ``strategies`` over ``n_values``.

    Parameters
    ----------
    n_values : List[int]
        Board sizes, run in the given order.
    strategies : List[str] | None
        Registered strategy names; None selects all of them.
    runs : int | None
        Runs per randomized strategy and N; defaults to
        ``settings.RUNS_PER_STRATEGY``.
    base_seed : int | None
        Seed of the first run; run ``i`` uses ``base_seed + i``. Defaults to
        ``settings.BASE_SEED``.
    time_limits : dict | None
        Per-strategy limits in seconds; defaults to ``settings.TIME_LIMITS``.
        A missing entry runs that strategy without a limit.
    validate : bool
        Re-check every reported solution independently of the board.
    progress_label : str | None
        When set, print one progress line per N.

    Returns
    -------
    BenchmarkResults
        ``results[strategy][N]`` holds grouped statistics and ``raw_runs``.
    """
    selected = strategies or list(STRATEGIES)
    unknown = [name for name in selected if name not in STRATEGIES]
    if unknown:
        raise ValueError("Unknown strategy(ies): " + ", ".join(unknown) + ". Available: " + ", ".join(STRATEGIES))

    if runs is None:
        runs = settings.RUNS_PER_STRATEGY
    if base_seed is None:
        base_seed = settings.BASE_SEED
    limits = settings.TIME_LIMITS if time_limits is None else time_limits
    results: BenchmarkResults = {name: {} for name in selected}
    progress = ProgressPrinter(len(n_values), progress_label) if progress_label else None

    for index, n in enumerate(n_values, start=1):
        if progress:
            progress.update(index, f"N={n}")

        for name in selected:
            repetitions = runs if name in RANDOMIZED else 1
            records: List[RunRecord] = []
            for run in range(repetitions):
                seed = base_seed + run if name in RANDOMIZED else None
                records.append(run_single(name, n, seed, limits.get(name), validate))

            entry = compute_grouped_statistics(records)
            entry["raw_runs"] = records
            results[name][n] = entry
            logger.info(
                "%s N=%d: %d/%d solved", name, n, entry["successes"], entry["total_runs"]
            )

    return results
