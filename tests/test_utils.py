"""Tests for the coordinate-based validity helpers."""

from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_search.utils import conflicts, conflicts_on2, is_valid_solution


class UtilsTests(unittest.TestCase):

    def test_conflict_counters_agree(self):
        rng = random.Random(17)
        for _ in range(50):
            n = rng.randint(4, 12)
            rows = list(range(n))
            rng.shuffle(rows)
            queens = list(enumerate(rows))
            self.assertEqual(conflicts(queens), conflicts_on2(queens))

    def test_row_pairs(self):
        self.assertEqual(conflicts([(0, 0), (2, 0), (4, 0)]), 3)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution([(1, 0), (3, 1), (0, 2), (2, 3)], 4))
        self.assertFalse(is_valid_solution([(1, 0), (3, 1), (0, 2)], 4))
        self.assertFalse(is_valid_solution([(0, 0), (1, 1), (2, 2), (3, 3)], 4))
        self.assertFalse(is_valid_solution([(1, 0), (3, 1), (0, 2), (2, 4)], 4))
        self.assertFalse(is_valid_solution([], 0))


if __name__ == "__main__":
    unittest.main()
