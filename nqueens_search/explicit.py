"""Closed-form N-Queens placement (no search).

A standalone calculator, separate from the search strategies. Queens are
placed by formula, with ``k = n // 2`` and 0-based columns:

- n even, n % 6 != 2: column ``i - 1`` gets row ``2i - 1`` and column
  ``k + i - 1`` gets row ``2i - 2`` for ``i`` in ``1..k``.
- n even, n % 6 == 2: with ``v = (2i + k - 3) mod n``, column ``i - 1`` gets
  row ``v`` and column ``n - i`` gets row ``n - 1 - v``.
- n odd: solve ``n - 1`` with the matching even formula, then add a queen in
  the bottom-right corner. Neither formula uses the main diagonal, so the
  corner queen is never attacked.
"""

from __future__ import annotations

import logging
from time import perf_counter

from .board import Board
from .errors import UnsupportedSize
from .search import MIN_SIZE, SearchResult

logger = logging.getLogger(__name__)


def _place_standard(board: Board, m: int) -> None:
    for i in range(1, m // 2 + 1):
        board.add_queen(i - 1, 2 * i - 1)
        board.add_queen(m // 2 + i - 1, 2 * i - 2)


def _place_shifted(board: Board, m: int) -> None:
    for i in range(1, m // 2 + 1):
        v = (2 * i + m // 2 - 3) % m
        board.add_queen(i - 1, v)
        board.add_queen(m - i, m - 1 - v)


def _place_even(board: Board, m: int) -> None:
    if m % 6 != 2:
        _place_standard(board, m)
    else:
        _place_shifted(board, m)


def explicit_board(n: int) -> Board:
    """Return a solved ``n`` x ``n`` board built by formula.

    Raises
    ------
    UnsupportedSize
        If ``n < 4``.
    """
    if n < MIN_SIZE:
        raise UnsupportedSize(n, MIN_SIZE)

    board = Board(n)
    if n % 2 == 0:
        _place_even(board, n)
    else:
        _place_even(board, n - 1)
        board.add_queen(n - 1, n - 1)
    return board


def explicit_solution(n: int) -> SearchResult:
    """Time ``explicit_board`` and wrap it as a result for reporting."""
    start = perf_counter()
    board = explicit_board(n)
    elapsed = perf_counter() - start
    logger.debug("explicit: placed %d queens in %.4fs", n, elapsed)
    return SearchResult(
        found=board.number_of_queens_under_attack() == 0,
        board=board,
        elapsed=elapsed,
        strategy="explicit",
    )
