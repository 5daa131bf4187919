"""Command-line interface for the N-Queens search strategies.

This module wires together configuration loading, strategy selection, result
printing and the benchmark pipeline. It keeps argument parsing and console
I/O away from the search modules so they stay easy to test programmatically.

Examples
--------
    nqueens-search heuristic -n 50 --seed 7 --time-limit 10
    nqueens-search blind-advanced -n 8 --debug
    nqueens-search explicit -n 1000
    nqueens-search find-seed -n 100 --time-limit 5
    nqueens-search benchmark --strategy min-conflict,heuristic --n-values 8,16
"""
from __future__ import annotations

import argparse
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from config_manager import ConfigManager

from . import settings
from .errors import UnsupportedSize
from .explicit import explicit_solution
from .reporting import debug_printer, find_seed, print_results
from .search import DEFAULT_LIMIT, MIN_SIZE
from .strategies import STRATEGIES, run_strategy
from .utils import is_valid_solution

COMMANDS = list(STRATEGIES) + ["explicit", "find-seed", "benchmark"]


# ------------- Utils --------------------------------------------------------

def parse_list(entries: Optional[List[str]], cast=str) -> Optional[list]:
    """Flatten repeated and comma-separated CLI values (``-s a -s b,c``).

    Returns ``None`` when no value is given so callers can fall back to the
    configured defaults.
    """
    if not entries:
        return None
    selected = []
    for entry in entries:
        for token in entry.split(","):
            token = token.strip()
            if token:
                selected.append(cast(token))
    return list(dict.fromkeys(selected)) or None


def require_supported_size(n: int) -> int:
    """Return ``n`` or raise ``UnsupportedSize`` when it is below 4."""
    if n < MIN_SIZE:
        raise UnsupportedSize(n, MIN_SIZE)
    return n


def apply_configuration(config_path: str) -> ConfigManager:
    """Load a configuration file and copy its values into ``settings``."""
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_PER_STRATEGY = int(experiment_settings.get("runs_per_strategy", settings.RUNS_PER_STRATEGY))
        settings.BASE_SEED = int(experiment_settings.get("base_seed", settings.BASE_SEED))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)
        settings.DATE_IN_FILENAMES = bool(experiment_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES))

    timeout_settings = config_mgr.get_timeout_settings()
    if timeout_settings:
        settings.set_time_limits(
            default=timeout_settings.get("default_time_limit"),
            **timeout_settings.get("per_strategy", {}),
        )

    strategy_settings = config_mgr.get_strategy_settings()
    if strategy_settings:
        settings.HEURISTIC_CHILDREN = int(strategy_settings.get("heuristic_children", settings.HEURISTIC_CHILDREN))
        settings.DEBUG_DELAY = float(strategy_settings.get("debug_delay", settings.DEBUG_DELAY))
        selected = config_mgr.get_selected_strategies()
        if selected:
            settings.SELECTED_STRATEGIES = list(selected)

    return config_mgr


# ------------- Commands -----------------------------------------------------

def run_search_command(args: argparse.Namespace) -> bool:
    """Run one strategy as requested on the command line and print the report."""
    n = require_supported_size(args.n)
    observer = debug_printer() if args.debug else None
    # Without --time-limit each strategy keeps its default; random placement has none.
    time_limit = DEFAULT_LIMIT if args.time_limit is None else args.time_limit

    result = run_strategy(args.command, n, seed=args.seed, time_limit=time_limit, debug=args.debug, observer=observer)

    if not result.found and result.timed_out:
        limit = settings.DEFAULT_TIME_LIMIT if args.time_limit is None else args.time_limit
        print(f"Exceeded {limit} seconds")
    print_results(result, n)
    return result.found


def run_benchmark_command(args: argparse.Namespace) -> None:
    """Benchmark the selected strategies and write CSV files and charts."""
    from .analysis.experiments import run_experiments
    from .analysis.plots import plot_and_save
    from .analysis.reporting import save_raw_data_to_csv, save_results_to_csv

    n_values = parse_list(args.n_values, int) or settings.N_VALUES
    for n in n_values:
        require_supported_size(n)
    strategies = parse_list(args.strategy) or settings.SELECTED_STRATEGIES
    runs = args.runs if args.runs is not None else settings.RUNS_PER_STRATEGY
    out_dir = args.out_dir or settings.OUT_DIR

    results = run_experiments(
        n_values,
        strategies=strategies,
        runs=runs,
        base_seed=settings.BASE_SEED,
        validate=args.validate,
        progress_label="Benchmark",
    )
    os.makedirs(out_dir, exist_ok=True)
    save_results_to_csv(results, n_values, out_dir)
    save_raw_data_to_csv(results, n_values, out_dir)
    if not args.no_plots:
        plot_and_save(results, n_values, out_dir)
    print("\nBenchmark completed.")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of every strategy.

    Verifies that:
    - Each strategy solves a small board with a fixed seed and that the
      solution passes the independent validity check.
    - The closed-form placement is valid for a range of sizes.
    - The benchmark pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests across all strategies...")

    sizes = {
        "completely-random": 4,
        "random-propagation": 8,
        "blind-naive": 4,
        "blind-intermediate": 6,
        "blind-advanced": 8,
        "min-conflict": 8,
        "heuristic": 8,
    }
    for name, n in sizes.items():
        result = run_strategy(name, n, seed=42, time_limit=60.0)
        if not result.found or result.board is None:
            raise AssertionError(f"{name} failed to find a solution for N={n}.")
        if not is_valid_solution(result.board.queens, n):
            raise AssertionError(f"{name} returned an invalid solution for N={n}: {result.board!r}.")
        print(f"  {name}: N={n} solved, configurations={result.configurations}")

    for n in range(MIN_SIZE, 40):
        board = explicit_solution(n).board
        if board is None or not is_valid_solution(board.queens, n):
            raise AssertionError(f"Explicit placement is invalid for N={n}.")
    print("  explicit: N=4..39 valid")

    from .analysis.experiments import run_experiments
    from .analysis.reporting import save_results_to_csv

    results = run_experiments([6], strategies=["blind-advanced", "heuristic"], runs=2, time_limits={})
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [6], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Solve N-Queens with a choice of search strategies.")
    parser.add_argument("command", nargs="?", choices=COMMANDS, help="Strategy to run, or explicit / find-seed / benchmark.")
    parser.add_argument("-n", type=int, default=8, help="Number of queens and board size (default: 8).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for randomized strategies (default: random).")
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Time limit in seconds (default: settings; random placement has none). Ignored with --debug.",
    )
    parser.add_argument("--debug", action="store_true", help="Print every visited board, slowly.")
    parser.add_argument("--attempts", type=int, default=None, help="find-seed: maximum seeds to try.")
    parser.add_argument("--strategy", "-s", action="append", help="benchmark: strategies to run (comma-separated or repeated).")
    parser.add_argument("--n-values", action="append", help="benchmark: board sizes (comma-separated or repeated).")
    parser.add_argument("--runs", type=int, default=None, help="benchmark: runs per randomized strategy.")
    parser.add_argument("--out-dir", default=None, help="benchmark: output directory.")
    parser.add_argument("--no-plots", action="store_true", help="benchmark: skip chart generation.")
    parser.add_argument("--validate", action="store_true", help="benchmark: re-check every solution.")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen command."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.quick_test:
        run_quick_regression_tests()
        return
    if args.command is None:
        parser.error("a command is required unless --quick-test is given")

    if args.config:
        try:
            apply_configuration(args.config)
        except FileNotFoundError as exc:
            print(f"Configuration file not found: {exc}")
            raise SystemExit(1) from exc

    solved = True
    try:
        if args.command == "explicit":
            print_results(explicit_solution(args.n), args.n)
        elif args.command == "find-seed":
            n = require_supported_size(args.n)
            time_limit = args.time_limit if args.time_limit is not None else settings.DEFAULT_TIME_LIMIT
            print(f"Searching for a seed that solves N-Queens under {time_limit} second(s) where N = {n}.")
            seed = find_seed(n, time_limit, attempts=args.attempts)
            print(f"Seed: {seed}" if seed is not None else "No seed found.")
            solved = seed is not None
        elif args.command == "benchmark":
            run_benchmark_command(args)
        else:
            solved = run_search_command(args)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except ValueError as exc:
        # UnsupportedSize is a ValueError too.
        print(f"Error: {exc}")
        raise SystemExit(1) from exc

    if not solved:
        # A failed or timed-out search exits non-zero.
        raise SystemExit(1)


if __name__ == "__main__":
    main()
