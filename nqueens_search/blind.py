"""Blind depth-first searches for the N-Queens problem.

Three variants share one iterative engine, ``depth_first_search``:

- blind_search_naive(n, ...): every unoccupied cell is a candidate for the
    next queen, attacked or not. Essentially brute force.
- blind_search_intermediate(n, ...): the next queen goes into the first
    column (left to right) that holds no queen yet; every row of that column
    is tried.
- blind_search_advanced(n, ...): only unoccupied cells that no queen attacks
    are tried, so unsafe branches are never pushed (propagation).

Implementation overview
-----------------------
- State: a ``Board``. Children are clones with one more queen, so exploring a
    child never mutates its parent; backtracking is a stack pop, not an undo.
- Frontier: an explicit list used as a stack, avoiding recursion limits.
- History: canonical keys of visited boards; a board reached twice through
    different placement orders is expanded once.
- Variants differ only in a ``DfsVariant`` value: which cells to expand, which
    boards are goals and which are dead ends.

Contract
--------
- Input: ``n``, ``time_limit`` (seconds, ignored in debug mode), ``debug`` and
    an optional ``observer`` receiving each visited board in debug mode.
- Output: ``SearchResult``. ``configurations`` counts popped boards, the
    initial empty board excluded.
- Sizes below 4 return a failed result without searching.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .board import Board, Location
from .search import (
    DEFAULT_LIMIT,
    Observer,
    SearchResult,
    Stopwatch,
    is_supported_size,
    notify,
    timed_out,
    unsupported,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DfsVariant:
    """Pluggable behaviour of the depth-first engine.

    Attributes
    ----------
    name : str
        Label used in results and log records.
    expand : callable
        Returns the cells where a child board adds its next queen.
    is_goal : callable
        True when the popped board is a solution.
    is_dead_end : callable
        True when the popped board cannot lead to a solution and must not be
        expanded. Checked after ``is_goal``.
    """

    name: str
    expand: Callable[[Board], Iterable[Location]]
    is_goal: Callable[[Board], bool]
    is_dead_end: Callable[[Board], bool]


def _is_full(board: Board) -> bool:
    return board.total_queens() == board.size


def _full_and_conflict_free(board: Board) -> bool:
    return _is_full(board) and board.number_of_queens_under_attack() == 0


def _first_column_without_queen(board: Board) -> int:
    occupied = {queen.x for queen in board.queens}
    for x in range(board.size):
        if x not in occupied:
            return x
    # Full boards are goals or dead ends and are never expanded.
    raise RuntimeError("All columns contain a queen.")


def _expand_column(board: Board) -> List[Location]:
    column = _first_column_without_queen(board)
    return [
        Location(column, y)
        for y in range(board.size)
        if not board.contains_queen(column, y)
    ]


def _exhausted_and_full(board: Board) -> bool:
    return not board.contains_valid_spot() and _is_full(board)


def _exhausted_short(board: Board) -> bool:
    return not board.contains_valid_spot() and not _is_full(board)


NAIVE = DfsVariant(
    name="blind-naive",
    expand=Board.available_positions,
    is_goal=_full_and_conflict_free,
    is_dead_end=_is_full,
)

INTERMEDIATE = DfsVariant(
    name="blind-intermediate",
    expand=_expand_column,
    is_goal=_full_and_conflict_free,
    is_dead_end=_is_full,
)

ADVANCED = DfsVariant(
    name="blind-advanced",
    expand=Board.available_safe_positions,
    is_goal=_exhausted_and_full,
    is_dead_end=_exhausted_short,
)


def depth_first_search(
    n: int,
    variant: DfsVariant,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """Run an explicit-stack depth-first search configured by ``variant``.

    Parameters
    ----------
    n : int
        Board size and number of queens to place.
    variant : DfsVariant
        Expansion, goal and dead-end rules.
    time_limit : float | None
        Budget in seconds; ignored in debug mode, None disables it. Omitted,
        it is ``settings.DEFAULT_TIME_LIMIT`` at call time.
    debug : bool
        Trace mode: every visited board goes to ``observer``.
    observer : callable, optional
        Receives each visited board in debug mode.

    Returns
    -------
    SearchResult
        ``found`` is False when the stack empties or the budget runs out.
    """
    if not is_supported_size(n):
        return unsupported(n, variant.name)

    stopwatch = Stopwatch(time_limit, debug)
    history = set()
    configurations = -1
    stack: List[Board] = [Board(n)]

    while stack:
        if stopwatch.expired():
            return timed_out(variant.name, stopwatch, configurations=max(configurations, 0))

        board = stack.pop()
        configurations += 1

        key = board.canonical_key()
        if key in history:
            continue
        history.add(key)

        notify(observer, debug, board)

        if variant.is_goal(board):
            logger.debug("%s: solved n=%d after %d configurations", variant.name, n, configurations)
            return SearchResult(
                found=True,
                board=board,
                configurations=configurations,
                elapsed=stopwatch.reported(),
                strategy=variant.name,
            )
        if variant.is_dead_end(board):
            continue

        for location in variant.expand(board):
            child = board.clone()
            child.add_queen(location.x, location.y)
            stack.append(child)

    return SearchResult(
        found=False,
        configurations=max(configurations, 0),
        elapsed=stopwatch.reported(),
        strategy=variant.name,
    )


def blind_search_naive(
    n: int,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """Brute-force DFS trying every unoccupied cell for the next queen."""
    return depth_first_search(n, NAIVE, time_limit, debug, observer)


def blind_search_intermediate(
    n: int,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """DFS filling the first empty column, trying each of its rows."""
    return depth_first_search(n, INTERMEDIATE, time_limit, debug, observer)


def blind_search_advanced(
    n: int,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """DFS with propagation: only safe, unoccupied cells are expanded.

    A branch ends when no safe empty cell remains; it is a solution exactly
    when N queens are on the board at that point.
    """
    return depth_first_search(n, ADVANCED, time_limit, debug, observer)
