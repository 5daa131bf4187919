"""Unit tests for the incremental attack-count board."""

from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_search.board import Board, Location, board_from_queens
from nqueens_search.errors import DuplicateQueen, NoQueenHere, NQueensError, OutOfBounds


def brute_force_attackers(board, x, y):
    """Count queens reaching (x, y) by walking every queen's lines."""
    count = 0
    for qx, qy in board.queens:
        if (qx, qy) == (x, y):
            continue
        if qx == x or qy == y or abs(qx - x) == abs(qy - y):
            count += 1
    return count


class BoardMutationTests(unittest.TestCase):

    def test_empty_board_is_all_safe(self):
        board = Board(5)
        self.assertEqual(board.total_queens(), 0)
        self.assertEqual(board.number_of_queens_under_attack(), 0)
        self.assertTrue(board.contains_valid_spot())
        self.assertEqual(len(board.available_safe_positions()), 25)

    def test_add_queen_marks_row_column_and_diagonals(self):
        board = Board(4)
        board.add_queen(1, 1)
        self.assertTrue(board.contains_queen(1, 1))
        for x, y in [(0, 1), (3, 1), (1, 0), (1, 3), (0, 0), (2, 2), (3, 3), (2, 0), (0, 2)]:
            self.assertEqual(board.number_of_queens_attacking_here(x, y), 1, (x, y))
        for x, y in [(2, 3), (3, 2), (3, 0), (0, 3)]:
            self.assertTrue(board.is_safe(x, y), (x, y))
        # A queen does not count against its own cell.
        self.assertEqual(board.number_of_queens_attacking_here(1, 1), 0)

    def test_queens_attack_through_other_queens(self):
        board = board_from_queens(5, [(0, 0), (2, 0), (4, 0)])
        self.assertEqual(board.number_of_queens_attacking_here(0, 0), 2)
        self.assertEqual(board.number_of_queens_attacking_here(2, 0), 2)
        self.assertEqual(board.number_of_queens_attacking_here(4, 0), 2)
        self.assertEqual(board.number_of_queens_under_attack(), 6)

    def test_add_then_remove_restores_state(self):
        board = board_from_queens(6, [(0, 1), (3, 4)])
        before = board.clone()
        board.add_queen(5, 5)
        board.remove_queen(5, 5)
        self.assertEqual(board, before)
        self.assertEqual(str(board), str(before))
        for y in range(6):
            for x in range(6):
                self.assertEqual(
                    board.number_of_queens_attacking_here(x, y),
                    before.number_of_queens_attacking_here(x, y),
                )

    def test_attack_counts_match_brute_force(self):
        rng = random.Random(3)
        for n in (4, 7, 9):
            board = Board(n)
            cells = [(x, y) for x in range(n) for y in range(n)]
            rng.shuffle(cells)
            for x, y in cells[: n + 2]:
                board.add_queen(x, y)
            board.remove_queen(*cells[0])
            for y in range(n):
                for x in range(n):
                    self.assertEqual(
                        board.number_of_queens_attacking_here(x, y),
                        brute_force_attackers(board, x, y),
                        (n, x, y),
                    )

    def test_clear_removes_everything(self):
        board = Board.with_queens_on_diagonal(6)
        board.clear()
        self.assertEqual(board.total_queens(), 0)
        self.assertEqual(board.number_of_queens_under_attack(), 0)
        self.assertEqual(board.size, 6)


class BoardErrorTests(unittest.TestCase):

    def test_out_of_bounds(self):
        board = Board(4)
        with self.assertRaises(OutOfBounds):
            board.add_queen(4, 0)
        with self.assertRaises(OutOfBounds):
            board.contains_queen(-1, 2)
        with self.assertRaises(OutOfBounds):
            board.is_safe(0, 7)
        self.assertFalse(board.in_bounds(4, 4))

    def test_duplicate_queen(self):
        board = Board(4)
        board.add_queen(2, 3)
        with self.assertRaises(DuplicateQueen):
            board.add_queen(2, 3)
        self.assertEqual(board.total_queens(), 1)

    def test_remove_missing_queen(self):
        board = Board(4)
        with self.assertRaises(NoQueenHere):
            board.remove_queen(0, 0)

    def test_errors_share_a_base_class(self):
        for error in (OutOfBounds(9, 9, 4), DuplicateQueen(0, 0), NoQueenHere(1, 1)):
            self.assertIsInstance(error, NQueensError)


class BoardQueryTests(unittest.TestCase):

    def test_safe_positions_are_available_positions(self):
        board = board_from_queens(6, [(0, 2), (4, 5)])
        available = set(board.available_positions())
        safe = board.available_safe_positions()
        self.assertTrue(set(safe) <= available)
        for location in safe:
            self.assertTrue(board.is_safe(location.x, location.y))
        self.assertEqual(len(available), 36 - 2)

    def test_positions_are_row_major(self):
        board = board_from_queens(4, [(1, 0)])
        positions = board.available_positions()
        self.assertEqual(positions[:3], [Location(0, 0), Location(2, 0), Location(3, 0)])
        self.assertEqual(positions[3], Location(0, 1))

    def test_contains_valid_spot(self):
        self.assertFalse(board_from_queens(4, [(1, 0), (3, 1), (0, 2), (2, 3)]).contains_valid_spot())
        self.assertTrue(board_from_queens(4, [(0, 0), (1, 2)]).contains_valid_spot())
        # Three queens leave no safe cell on this board.
        self.assertFalse(board_from_queens(4, [(0, 0), (1, 2), (3, 1)]).contains_valid_spot())

    def test_solution_has_no_conflicts(self):
        board = board_from_queens(4, [(1, 0), (3, 1), (0, 2), (2, 3)])
        self.assertEqual(board.number_of_queens_under_attack(), 0)
        self.assertEqual(board.total_queens(), 4)

    def test_diagonal_factory(self):
        board = Board.with_queens_on_diagonal(5)
        self.assertEqual(board.queens, frozenset(Location(i, i) for i in range(5)))
        # Every queen is reached by the other four along the diagonal.
        self.assertEqual(board.number_of_queens_under_attack(), 20)

    def test_one_queen_per_column_factory(self):
        board = Board.with_one_queen_per_column(8, random.Random(11))
        columns = sorted(q.x for q in board.queens)
        rows = sorted(q.y for q in board.queens)
        self.assertEqual(columns, list(range(8)))
        self.assertEqual(rows, list(range(8)))
        again = Board.with_one_queen_per_column(8, random.Random(11))
        self.assertEqual(board, again)

    def test_clone_is_independent(self):
        board = board_from_queens(5, [(0, 0)])
        copy = board.clone()
        copy.add_queen(2, 1)
        self.assertEqual(board.total_queens(), 1)
        self.assertTrue(board.is_safe(2, 1))
        self.assertEqual(board.number_of_queens_attacking_here(2, 0), 1)
        self.assertEqual(copy.number_of_queens_attacking_here(2, 0), 2)

    def test_canonical_key_ignores_insertion_order(self):
        a = board_from_queens(5, [(0, 1), (2, 3), (4, 0)])
        b = board_from_queens(5, [(4, 0), (0, 1), (2, 3)])
        self.assertEqual(a.canonical_key(), b.canonical_key())
        self.assertEqual(a, b)


class BoardProtocolTests(unittest.TestCase):

    def test_fewer_conflicts_ranks_higher(self):
        solved = board_from_queens(4, [(1, 0), (3, 1), (0, 2), (2, 3)])
        diagonal = Board.with_queens_on_diagonal(4)
        self.assertTrue(solved > diagonal)
        self.assertTrue(diagonal < solved)
        self.assertFalse(solved < diagonal)

    def test_boards_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Board(4))

    def test_str_rendering(self):
        board = board_from_queens(4, [(0, 0)])
        expected = "\n".join([
            "Q * * *",
            "* * - -",
            "* - * -",
            "* - - *",
        ])
        self.assertEqual(str(board), expected)

    def test_repr_lists_sorted_queens(self):
        board = board_from_queens(4, [(3, 1), (0, 2)])
        self.assertEqual(repr(board), "Board(size=4, queens=[(0, 2), (3, 1)])")


if __name__ == "__main__":
    unittest.main()
