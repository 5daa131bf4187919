"""Tests for the benchmark runner, statistics and CSV exports."""

import csv
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_search.analysis.experiments import run_experiments, run_single
from nqueens_search.analysis.reporting import (
    RAW_COLUMNS,
    SUMMARY_COLUMNS,
    save_raw_data_to_csv,
    save_results_to_csv,
)
from nqueens_search.analysis.stats import compute_detailed_statistics, compute_grouped_statistics
from nqueens_search.board import board_from_queens
from nqueens_search.search import SearchResult


class StatsTests(unittest.TestCase):

    def test_detailed_statistics(self):
        stats = compute_detailed_statistics([1.0, 2.0, 3.0, 4.0])
        self.assertEqual(stats["count"], 4)
        self.assertEqual(stats["mean"], 2.5)
        self.assertEqual(stats["median"], 2.5)
        self.assertEqual(stats["range"], 3.0)

    def test_empty_statistics(self):
        stats = compute_detailed_statistics([])
        self.assertEqual(stats["count"], 0)
        self.assertIsNone(stats["mean"])

    def test_grouped_statistics(self):
        records = [
            {"success": True, "timeout": False, "time": 1.0, "configurations": 10},
            {"success": False, "timeout": True, "time": 5.0, "configurations": 99},
            {"success": True, "timeout": False, "time": 3.0, "configurations": 30},
        ]
        stats = compute_grouped_statistics(records)
        self.assertEqual(stats["successes"], 2)
        self.assertEqual(stats["timeouts"], 1)
        self.assertEqual(stats["failures"], 0)
        self.assertAlmostEqual(stats["success_rate"], 2 / 3)
        self.assertEqual(stats["success_time"]["mean"], 2.0)
        self.assertEqual(stats["timeout_configurations"]["max"], 99)
        self.assertNotIn("success_local_optimums", stats)


class ExperimentTests(unittest.TestCase):

    def test_run_single_record(self):
        record = run_single("heuristic", 6, seed=4, time_limit=30.0, validate=True)
        self.assertTrue(record["success"])
        self.assertEqual(record["seed"], 4)
        self.assertIn("local_optimums", record)

        blind = run_single("blind-advanced", 6, seed=None, time_limit=30.0, validate=True)
        self.assertTrue(blind["success"])
        self.assertNotIn("seed", blind)

    def test_validation_rejects_invalid_board(self):
        # Two queens share a row, yet the run claims success.
        bogus = SearchResult(found=True, board=board_from_queens(4, [(0, 0), (1, 0), (2, 1), (3, 3)]))
        with mock.patch("nqueens_search.analysis.experiments.run_strategy", return_value=bogus):
            with self.assertRaises(AssertionError):
                run_single("heuristic", 4, seed=1, time_limit=None, validate=True)
            self.assertTrue(run_single("heuristic", 4, seed=1, time_limit=None)["success"])

    def test_blind_strategies_run_once(self):
        results = run_experiments([5, 6], strategies=["blind-advanced", "min-conflict"], runs=3, time_limits={})
        self.assertEqual(results["blind-advanced"][5]["total_runs"], 1)
        self.assertEqual(results["min-conflict"][6]["total_runs"], 3)
        seeds = [record["seed"] for record in results["min-conflict"][6]["raw_runs"]]
        self.assertEqual(seeds, [0, 1, 2])
        self.assertEqual(results["min-conflict"][6]["success_rate"], 1.0)

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            run_experiments([4], strategies=["simulated-annealing"])

    def test_csv_exports(self):
        results = run_experiments([4, 6], strategies=["blind-intermediate", "heuristic"], runs=2, base_seed=5, time_limits={})
        with tempfile.TemporaryDirectory() as tmpdir, redirect_stdout(StringIO()):
            summary_path = save_results_to_csv(results, [4, 6], tmpdir)
            raw_path = save_raw_data_to_csv(results, [4, 6], tmpdir)

            with open(summary_path, newline="") as f:
                rows = list(csv.reader(f))
            self.assertEqual(rows[0], SUMMARY_COLUMNS)
            self.assertEqual(len(rows), 1 + 4)

            with open(raw_path, newline="") as f:
                raw = list(csv.DictReader(f))
            self.assertEqual(list(raw[0].keys()), RAW_COLUMNS)
            # One blind run plus two heuristic runs for each N.
            self.assertEqual(len(raw), 2 * (1 + 2))
            self.assertEqual({row["success"] for row in raw}, {"1"})


class PlotTests(unittest.TestCase):

    def test_charts_are_written(self):
        from nqueens_search.analysis.plots import plot_and_save

        results = run_experiments([4, 6], strategies=["blind-advanced", "min-conflict", "heuristic"], runs=2, time_limits={})
        with tempfile.TemporaryDirectory() as tmpdir, redirect_stdout(StringIO()):
            paths = plot_and_save(results, [4, 6], tmpdir)
            names = sorted(Path(path).name for path in paths)
            self.assertEqual(names, [
                "01_success_rate_vs_N.png",
                "02_time_vs_N_log_scale.png",
                "03_configurations_vs_N.png",
                "04_local_optimums_vs_N.png",
            ])
            for path in paths:
                self.assertGreater(Path(path).stat().st_size, 0)


if __name__ == "__main__":
    unittest.main()
