"""
Benchmark and analysis package for the N-Queens search strategies.

This package contains:
- stats: typed summaries and aggregation helpers
- experiments: sequential runner over board sizes and strategies
- reporting: CSV exports and raw-data writers
- plots: visualization utilities (imported on demand; needs matplotlib)
"""

from .stats import (
    StatsSummary,
    RunRecord,
    BenchmarkResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "BenchmarkResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
]
