"""Tests for result formatting, the debug tracer and the seed finder."""

from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_search.board import board_from_queens
from nqueens_search.local_search import heuristic_search
from nqueens_search.reporting import (
    debug_printer,
    find_seed,
    format_results,
    print_results,
    queen_score_grid,
    score_grid,
)
from nqueens_search.search import SearchResult

SOLVED_FOUR = [(1, 0), (3, 1), (0, 2), (2, 3)]


class FormatResultsTests(unittest.TestCase):

    def test_blind_style_result(self):
        result = SearchResult(
            found=True,
            board=board_from_queens(4, SOLVED_FOUR),
            configurations=12,
            elapsed=0.5,
            strategy="blind-advanced",
        )
        text = format_results(result)
        self.assertIn("N = 4", text)
        self.assertIn("Solution found:\t\t\tyes", text)
        self.assertIn("0.500 seconds", text)
        self.assertIn("Configurations Attempted:\t12", text)
        self.assertIn("Local Optimums Encountered:\tn/a", text)
        self.assertIn("Steps for Global Optimum:\tn/a", text)
        self.assertIn("Seed used:\t\t\tnone", text)
        self.assertTrue(text.endswith("* Q * *\n* * * Q\nQ * * *\n* * Q *"))

    def test_debug_and_timeout_result(self):
        result = SearchResult(found=False, timed_out=True, local_optimums=3, steps=1, seed=9)
        text = format_results(result, n=8)
        self.assertIn("N = 8", text)
        self.assertIn("Solution found:\t\t\tno", text)
        self.assertIn("time limit exceeded", text)
        self.assertIn("debug mode, not measured", text)
        self.assertIn("Local Optimums Encountered:\t3", text)
        self.assertIn("Seed used:\t\t\t9", text)

    def test_print_results(self):
        buffer = StringIO()
        with redirect_stdout(buffer):
            print_results(SearchResult(found=False, elapsed=0.0), 5)
        self.assertIn("N = 5", buffer.getvalue())


class ScoreGridTests(unittest.TestCase):

    def test_score_grids(self):
        board = board_from_queens(4, [(0, 0), (3, 0)])
        self.assertEqual(score_grid(board).splitlines()[0], "1 2 2 1")
        self.assertEqual(queen_score_grid(board).splitlines()[0], "1 - - 1")
        self.assertEqual(queen_score_grid(board).splitlines()[1], "- - - -")


class DebugPrinterTests(unittest.TestCase):

    def test_prints_board_then_sleeps(self):
        pauses = []
        observer = debug_printer(delay=0.5, sleep=pauses.append)
        buffer = StringIO()
        with redirect_stdout(buffer):
            observer(board_from_queens(4, SOLVED_FOUR))
            observer(board_from_queens(4, SOLVED_FOUR))
        self.assertEqual(pauses, [0.5, 0.5])
        self.assertEqual(buffer.getvalue().count("Q"), 8)

    def test_zero_delay_never_sleeps(self):
        pauses = []
        observer = debug_printer(delay=0, sleep=pauses.append)
        with redirect_stdout(StringIO()):
            observer(board_from_queens(4))
        self.assertEqual(pauses, [])


class FindSeedTests(unittest.TestCase):

    def test_found_seed_replays(self):
        seed = find_seed(8, 30.0, attempts=5, rng=random.Random(1))
        self.assertIsNotNone(seed)
        self.assertTrue(heuristic_search(8, seed=seed, time_limit=30.0).found)

    def test_exhausted_attempts(self):
        self.assertIsNone(find_seed(60, 0.0, attempts=3, rng=random.Random(1)))


if __name__ == "__main__":
    unittest.main()
