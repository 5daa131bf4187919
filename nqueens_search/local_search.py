"""Local-repair searches driven by the minimum-conflict heuristic.

min_conflict_search(n, seed, ...)
    Start with every queen on the main diagonal. At each step move the queen
    with the most attackers to the cell of its own column with the fewest
    attackers. A configuration seen before means the search is cycling on a
    local optimum: the board is replaced by a fresh one with one queen per
    column on shuffled rows and the step counter restarts.

heuristic_search(n, seed, ..., children=10)
    Same start and restart policy, but each iteration derives ``children``
    boards from the current one. In a child every attacked queen is lifted and
    dropped on the first safe row of its column, or on a random row when none
    is safe. All children go into a shared max-heap ranked by fewest
    conflicts and the best one is expanded next. It explores more
    configurations per step but rarely needs to restart.

Both runs are reproducible: the random generator seeded from ``seed`` is
passed explicitly to every helper that draws from it. Counters reported:
``configurations`` (boards expanded, the start board excluded),
``local_optimums`` (restarts) and ``steps`` (boards expanded since the last
restart).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from . import settings
from .board import Board, Location
from .priority_queue import PriorityQueue
from .search import (
    DEFAULT_LIMIT,
    Observer,
    SearchResult,
    Stopwatch,
    is_supported_size,
    notify,
    resolve_seed,
    timed_out,
    unsupported,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Square:
    """A cell paired with its attacker count, detached from any board."""

    location: Location
    score: int


def _most_attacked_queen(board: Board) -> Location:
    queue: PriorityQueue[Square] = PriorityQueue(key=lambda square: square.score)
    for queen in sorted(board.queens):
        queue.add(Square(queen, board.number_of_queens_attacking_here(queen.x, queen.y)))
    return queue.remove_max().location


def _move_to_least_attacked_row(board: Board, queen: Location) -> None:
    """Move ``queen`` within its column to the cell with the fewest attackers.

    Scores are taken before the queen is lifted, so the other cells of its
    column still carry its own vertical attack.
    """
    if board.is_safe(queen.x, queen.y):
        return

    queue: PriorityQueue[Square] = PriorityQueue(key=lambda square: -square.score)
    for y in range(board.size):
        queue.add(Square(Location(queen.x, y), board.number_of_queens_attacking_here(queen.x, y)))

    board.remove_queen(queen.x, queen.y)
    best = queue.remove_max()
    board.add_queen(queen.x, best.location.y)


def min_conflict_search(
    n: int,
    seed: Optional[int] = None,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """Single-board minimum-conflict repair with restart on local optima.

    Parameters
    ----------
    n : int
        Board size and number of queens.
    seed : int | None
        Seed for restart boards; a fresh one is drawn (and reported) if None.
    time_limit : float | None
        Budget in seconds; ignored in debug mode. Omitted, it is
        ``settings.DEFAULT_TIME_LIMIT`` at call time.
    debug : bool
        Trace mode: each expanded board goes to ``observer``.
    observer : callable, optional
        Receives each expanded board in debug mode.
    """
    strategy = "min-conflict"
    if not is_supported_size(n):
        return unsupported(n, strategy, seed)

    seed = resolve_seed(seed)
    rng = random.Random(seed)
    stopwatch = Stopwatch(time_limit, debug)
    history = set()
    configurations = -1
    local_optimums = 0
    steps = -1

    board = Board.with_queens_on_diagonal(n)

    while board.number_of_queens_under_attack() != 0:
        if stopwatch.expired():
            return timed_out(
                strategy, stopwatch,
                configurations=max(configurations, 0),
                local_optimums=local_optimums,
                steps=max(steps, 0),
                seed=seed,
            )

        key = board.canonical_key()
        if key in history:
            steps = -1
            local_optimums += 1
            board = Board.with_one_queen_per_column(n, rng)
            logger.debug("%s: stuck at local optimum, board reset (%d so far)", strategy, local_optimums)
            continue
        history.add(key)

        configurations += 1
        steps += 1
        notify(observer, debug, board)

        _move_to_least_attacked_row(board, _most_attacked_queen(board))

    return SearchResult(
        found=True,
        board=board,
        configurations=max(configurations, 0),
        elapsed=stopwatch.reported(),
        local_optimums=local_optimums,
        steps=max(steps, 0),
        seed=seed,
        strategy=strategy,
    )


def _repaired_child(board: Board, rng: random.Random) -> Board:
    """Derive a child where every attacked queen moves to a safe row if any."""
    child = board.clone()
    n = child.size

    for queen in sorted(child.queens):
        if child.is_safe(queen.x, queen.y):
            continue

        child.remove_queen(queen.x, queen.y)

        # Random fallback row when the column has no safe cell.
        y = (queen.y + rng.randrange(n)) % n
        for row in range(n):
            if child.is_safe(queen.x, row):
                y = row
                break

        child.add_queen(queen.x, y)

    return child


def _generate_children(queue: PriorityQueue[Board], board: Board, rng: random.Random, children: int) -> None:
    for _ in range(children):
        queue.add(_repaired_child(board, rng))


def heuristic_search(
    n: int,
    seed: Optional[int] = None,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
    children: Optional[int] = None,
) -> SearchResult:
    """Population-style repair: expand the best of many repaired children.

    Parameters
    ----------
    n : int
        Board size and number of queens.
    seed : int | None
        Seed for child generation and restarts; drawn fresh if None.
    time_limit : float | None
        Budget in seconds; ignored in debug mode. Omitted, it is
        ``settings.DEFAULT_TIME_LIMIT`` at call time.
    debug : bool
        Trace mode: each expanded board goes to ``observer``.
    observer : callable, optional
        Receives each expanded board in debug mode.
    children : int | None
        Children generated per expanded board; defaults to
        ``settings.HEURISTIC_CHILDREN``.
    """
    strategy = "heuristic"
    if not is_supported_size(n):
        return unsupported(n, strategy, seed)

    if children is None:
        children = settings.HEURISTIC_CHILDREN
    seed = resolve_seed(seed)
    rng = random.Random(seed)
    stopwatch = Stopwatch(time_limit, debug)
    history = set()
    configurations = -1
    local_optimums = 0
    steps = -1

    # Boards order themselves: fewer conflicts ranks higher.
    queue: PriorityQueue[Board] = PriorityQueue()
    queue.add(Board.with_queens_on_diagonal(n))

    while not queue.is_empty():
        if stopwatch.expired():
            return timed_out(
                strategy, stopwatch,
                configurations=max(configurations, 0),
                local_optimums=local_optimums,
                steps=max(steps, 0),
                seed=seed,
            )

        board = queue.remove_max()

        key = board.canonical_key()
        if key in history:
            queue.clear()
            steps = -1
            local_optimums += 1
            queue.add(Board.with_one_queen_per_column(n, rng))
            logger.debug("%s: stuck at local optimum, board reset (%d so far)", strategy, local_optimums)
            continue
        history.add(key)

        configurations += 1
        steps += 1
        notify(observer, debug, board)

        if board.number_of_queens_under_attack() == 0:
            return SearchResult(
                found=True,
                board=board,
                configurations=configurations,
                elapsed=stopwatch.reported(),
                local_optimums=local_optimums,
                steps=steps,
                seed=seed,
                strategy=strategy,
            )

        _generate_children(queue, board, rng, children)

    return SearchResult(
        found=False,
        configurations=max(configurations, 0),
        elapsed=stopwatch.reported(),
        local_optimums=local_optimums,
        steps=max(steps, 0),
        seed=seed,
        strategy=strategy,
    )
