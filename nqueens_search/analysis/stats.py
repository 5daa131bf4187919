"""Typed result shapes and statistics helpers for the benchmark pipeline.

Defines ``TypedDict`` structures for benchmark outputs and provides utilities
to compute aggregate statistics across heterogeneous run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict

METRICS = ["time", "configurations", "local_optimums", "steps"]


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict, total=False):
    success: bool
    timeout: bool
    time: float
    configurations: int
    local_optimums: int
    steps: int
    seed: int


# results[strategy][N] -> grouped statistics plus "raw_runs"
BenchmarkResults = Dict[str, Dict[int, Dict[str, Any]]]


def compute_detailed_statistics(values: List[float], label: str = "") -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Parameters
    ----------
    values : List[float]
        Values to summarize.
    label : str, optional
        Carried for the caller's bookkeeping; not used in calculations.

    Returns
    -------
    StatsSummary
        count, mean, median, population std, min, max, inclusive quartiles
        and range.
        When ``values`` is empty every numeric field is ``None`` and ``count``
        is 0 so CSV rows keep a stable shape.
    """
    fields = ("mean", "median", "std", "min", "max", "q25", "q75", "range")
    if not values:
        summary: StatsSummary = {"count": 0}
        summary.update(dict.fromkeys(fields))  # type: ignore[typeddict-item]
        return summary

    low, high = min(values), max(values)
    if len(values) > 1:
        q25, _, q75 = statistics.quantiles(values, n=4, method="inclusive")
    else:
        q25 = q75 = values[0]

    return StatsSummary(
        count=len(values),
        mean=statistics.mean(values),
        median=statistics.median(values),
        std=statistics.pstdev(values),
        min=low,
        max=high,
        q25=q25,
        q75=q75,
        range=high - low,
    )


def compute_grouped_statistics(
    results_list: List[RunRecord], success_key: str = "success"
) -> Dict[str, Any]:
    """Aggregate metrics by outcome groups (success, failure, timeout).

    Returns rates (``success_rate``, ``timeout_rate``, ``failure_rate``),
    counters (``total_runs``, ``successes``, ``failures``, ``timeouts``) and a
    ``<group>_<metric>`` summary for every metric of ``METRICS`` present in
    the group, where ``<group>`` is ``all``, ``success``, ``timeout`` or
    ``failure``.
    """
    successes = [r for r in results_list if r.get(success_key, False)]
    timeouts = [r for r in results_list if r.get("timeout", False)]
    failures = [r for r in results_list if not r.get(success_key, False) and not r.get("timeout", False)]
    total = len(results_list)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": len(failures),
        "timeouts": len(timeouts),
        "success_rate": len(successes) / total if total else 0,
        "timeout_rate": len(timeouts) / total if total else 0,
        "failure_rate": len(failures) / total if total else 0,
    }

    for group, records in (("all", results_list), ("success", successes), ("timeout", timeouts), ("failure", failures)):
        for metric in METRICS:
            values = [r[metric] for r in records if r.get(metric) is not None]  # type: ignore[literal-required]
            if values:
                stats[f"{group}_{metric}"] = compute_detailed_statistics(values, f"{group}_{metric}")

    return stats


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected; values <= 0 are coerced to 1.
    label : str
        Short label printed in front of the counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)
