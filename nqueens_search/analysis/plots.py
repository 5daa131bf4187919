"""Visualization utilities for benchmark outputs.

Charts are written as PNG files into ``out_dir``:

- 01_success_rate_vs_N.png: success rate per strategy vs N.
- 02_time_vs_N_log_scale.png: mean time of successful runs vs N (log scale).
- 03_configurations_vs_N.png: mean configurations explored by successful
  runs vs N (log scale), a hardware-independent effort proxy.
- 04_local_optimums_vs_N.png: mean restarts of the local-repair strategies.

Strategies with no data for a chart are left out of it.
"""
from __future__ import annotations

import os
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402

from .. import settings  # noqa: E402
from .stats import BenchmarkResults  # noqa: E402


def _series(results: BenchmarkResults, strategy: str, n_values: List[int], key: str, field: Optional[str] = "mean"):
    """Return ``n_values`` as an array alongside the metric, NaN where missing."""
    values = []
    for n in n_values:
        entry = results.get(strategy, {}).get(n, {})
        if field is None:
            value = entry.get(key)
        else:
            value = (entry.get(key) or {}).get(field)
        values.append(np.nan if value is None else float(value))
    return np.asarray(n_values, dtype=float), np.asarray(values, dtype=float)


def _save(fig, out_dir: str, name: str) -> str:
    suffix = f"_{settings.RUN_ID}" if settings.DATE_IN_FILENAMES else ""
    root, ext = os.path.splitext(name)
    path = os.path.join(out_dir, f"{root}{suffix}{ext}")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def _line_chart(
    results: BenchmarkResults,
    n_values: List[int],
    key: str,
    field: Optional[str],
    title: str,
    ylabel: str,
    out_dir: str,
    name: str,
    log_scale: bool = False,
    strategies: Optional[List[str]] = None,
) -> Optional[str]:
    fig, ax = plt.subplots(figsize=(9, 5.5))
    plotted = False
    for strategy in strategies or list(results):
        xs, ys = _series(results, strategy, n_values, key, field)
        mask = ~np.isnan(ys)
        if log_scale:
            mask &= ys > 0
        if not mask.any():
            continue
        ax.plot(xs[mask], ys[mask], marker="o", label=strategy)
        plotted = True

    if not plotted:
        plt.close(fig)
        return None

    if log_scale:
        ax.set_yscale("log")
    ax.set_title(title)
    ax.set_xlabel("N (board size)")
    ax.set_ylabel(ylabel)
    ax.set_xticks(n_values)
    ax.legend()
    return _save(fig, out_dir, name)


def plot_and_save(results: BenchmarkResults, n_values: List[int], out_dir: str) -> List[str]:
    """Generate every chart for ``results`` and return the written paths."""
    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")

    written = [
        _line_chart(results, n_values, "success_rate", None,
                    "Success rate vs N", "Success rate", out_dir, "01_success_rate_vs_N.png"),
        _line_chart(results, n_values, "success_time", "mean",
                    "Mean time of successful runs vs N", "Time [s]", out_dir,
                    "02_time_vs_N_log_scale.png", log_scale=True),
        _line_chart(results, n_values, "success_configurations", "mean",
                    "Configurations explored vs N", "Configurations", out_dir,
                    "03_configurations_vs_N.png", log_scale=True),
        _line_chart(results, n_values, "success_local_optimums", "mean",
                    "Local optima (restarts) vs N", "Restarts", out_dir,
                    "04_local_optimums_vs_N.png"),
    ]
    paths = [path for path in written if path]
    for path in paths:
        print(f"Chart saved: {path}")
    return paths
