"""Independent validity checks on queen placements.

These helpers do not use the board's attack bookkeeping; they recount
conflicts pairwise from coordinates and serve as a reference to validate
search results.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence, Tuple


def conflicts(queens: Iterable[Tuple[int, int]]) -> int:
    """Count attacking queen pairs in O(N) with per-line counters.

    Queens sharing a column, a row or a diagonal form one pair each; pairs are
    counted once per shared line.
    """
    columns: Counter[int] = Counter()
    rows: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for x, y in queens:
        columns[x] += 1
        rows[y] += 1
        diag1[y - x] += 1
        diag2[y + x] += 1

    def _pairs(counter: Counter[int]) -> int:
        return sum(count * (count - 1) // 2 for count in counter.values() if count > 1)

    return _pairs(columns) + _pairs(rows) + _pairs(diag1) + _pairs(diag2)


def conflicts_on2(queens: Sequence[Tuple[int, int]]) -> int:
    """Count attacking pairs in O(N^2); reference for ``conflicts``."""
    total = 0
    for i in range(len(queens)):
        xi, yi = queens[i]
        for j in range(i + 1, len(queens)):
            xj, yj = queens[j]
            if xi == xj or yi == yj or abs(xi - xj) == abs(yi - yj):
                total += 1
    return total


def is_valid_solution(queens: Iterable[Tuple[int, int]], size: int) -> bool:
    """Return True if ``queens`` is a complete, non-attacking placement.

    Contract
    - Input: (x, y) pairs and the board size N
    - Valid if: exactly N distinct in-range queens and no attacking pair
    """
    placed = set(queens)
    if size <= 0 or len(placed) != size:
        return False
    for x, y in placed:
        if not (0 <= x < size and 0 <= y < size):
            return False
    return conflicts(placed) == 0
