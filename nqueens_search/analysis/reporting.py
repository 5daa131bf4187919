"""CSV export utilities for benchmark outputs (aggregates and raw runs).

These helpers materialize one summary row per (strategy, N) pair as well as
every raw run for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import List

from .. import settings
from .stats import BenchmarkResults

SUMMARY_COLUMNS = [
    "strategy",
    "n",
    "total_runs",
    "successes",
    "failures",
    "timeouts",
    "success_rate",
    "timeout_rate",
    "success_time_mean",
    "success_time_median",
    "success_configurations_mean",
    "success_configurations_median",
    "success_local_optimums_mean",
    "success_steps_mean",
]

RAW_COLUMNS = ["strategy", "n", "run", "success", "timeout", "time", "configurations", "local_optimums", "steps", "seed"]


def _suffix() -> str:
    """Return the datestamp suffix when enabled in settings (or empty)."""
    if settings.DATE_IN_FILENAMES:
        return f"_{settings.RUN_ID}"
    return ""


def _stat(entry: dict, key: str, field: str):
    summary = entry.get(key) or {}
    value = summary.get(field)
    return "" if value is None else value


def save_results_to_csv(results: BenchmarkResults, n_values: List[int], out_dir: str) -> str:
    """Write per-(strategy, N) aggregate metrics to CSV and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_summary{_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_COLUMNS)
        for strategy, per_n in results.items():
            for n in n_values:
                entry = per_n.get(n)
                if not entry:
                    continue
                writer.writerow([
                    strategy,
                    n,
                    entry["total_runs"],
                    entry["successes"],
                    entry["failures"],
                    entry["timeouts"],
                    entry["success_rate"],
                    entry["timeout_rate"],
                    _stat(entry, "success_time", "mean"),
                    _stat(entry, "success_time", "median"),
                    _stat(entry, "success_configurations", "mean"),
                    _stat(entry, "success_configurations", "median"),
                    _stat(entry, "success_local_optimums", "mean"),
                    _stat(entry, "success_steps", "mean"),
                ])

    print(f"Summary CSV saved: {filename}")
    return filename


def save_raw_data_to_csv(results: BenchmarkResults, n_values: List[int], out_dir: str) -> str:
    """Write every individual run to CSV and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_raw{_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(RAW_COLUMNS)
        for strategy, per_n in results.items():
            for n in n_values:
                entry = per_n.get(n)
                if not entry:
                    continue
                for run, record in enumerate(entry.get("raw_runs", []), start=1):
                    writer.writerow([
                        strategy,
                        n,
                        run,
                        int(record.get("success", False)),
                        int(record.get("timeout", False)),
                        record.get("time", ""),
                        record.get("configurations", ""),
                        record.get("local_optimums", ""),
                        record.get("steps", ""),
                        record.get("seed", ""),
                    ])

    print(f"Raw data CSV saved: {filename}")
    return filename
