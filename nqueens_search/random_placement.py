"""Random placement strategies.

Both strategies keep one mutable board rather than a search tree. Queens are
dropped on uniformly drawn cells; a draw is accepted when the cell is empty
and unattacked. The two variants differ only in what an invalid draw does:

- completely_random: the first invalid draw abandons the board, which is
  cleared and refilled from scratch.
- random_with_propagation: invalid draws are discarded and redrawn; the board
  is only abandoned once no safe empty cell remains with fewer than N queens.

Runs are deterministic for a given seed. There is no time limit by default,
so a run retries until it succeeds; pass ``time_limit`` for a bounded run.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .board import Board
from .search import (
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


def _fill_randomly(board: Board, rng: random.Random, stop_on_invalid: bool) -> None:
    """Drop queens on random cells until no safe spot is left."""
    n = board.size
    while board.contains_valid_spot():
        x = rng.randrange(n)
        y = rng.randrange(n)
        if not board.contains_queen(x, y) and board.is_safe(x, y):
            board.add_queen(x, y)
        elif stop_on_invalid:
            break


def random_placement(
    n: int,
    seed: Optional[int] = None,
    stop_on_invalid: bool = False,
    debug: bool = False,
    observer: Optional[Observer] = None,
    time_limit: Optional[float] = None,
    strategy: str = "random-propagation",
) -> SearchResult:
    """Place queens at random, restarting until N queens fit.

    Parameters
    ----------
    n : int
        Board size and number of queens.
    seed : int | None
        Seed for the generator; a fresh one is drawn (and reported) if None.
    stop_on_invalid : bool
        Abandon the board on the first invalid draw instead of redrawing.
    debug : bool
        Trace mode: each abandoned board goes to ``observer``.
    observer : callable, optional
        Receives each abandoned board in debug mode.
    time_limit : float | None
        Optional budget in seconds, polled once per attempt.

    Returns
    -------
    SearchResult
        ``configurations`` counts abandoned boards.
    """
    if not is_supported_size(n):
        return unsupported(n, strategy, seed)

    seed = resolve_seed(seed)
    rng = random.Random(seed)
    stopwatch = Stopwatch(time_limit, debug)
    board = Board(n)
    configurations = -1

    while True:
        if stopwatch.expired():
            return timed_out(strategy, stopwatch, configurations=max(configurations, 0), seed=seed)

        configurations += 1
        _fill_randomly(board, rng, stop_on_invalid)

        if board.total_queens() == n:
            break

        notify(observer, debug, board)
        board.clear()

    logger.debug("%s: solved n=%d with seed %d after %d restarts", strategy, n, seed, configurations)
    return SearchResult(
        found=True,
        board=board,
        configurations=configurations,
        elapsed=stopwatch.reported(),
        seed=seed,
        strategy=strategy,
    )


def completely_random(
    n: int,
    seed: Optional[int] = None,
    debug: bool = False,
    observer: Optional[Observer] = None,
    time_limit: Optional[float] = None,
) -> SearchResult:
    """Restart from an empty board on the first occupied or attacked draw."""
    return random_placement(
        n, seed, stop_on_invalid=True, debug=debug, observer=observer,
        time_limit=time_limit, strategy="completely-random",
    )


def random_with_propagation(
    n: int,
    seed: Optional[int] = None,
    debug: bool = False,
    observer: Optional[Observer] = None,
    time_limit: Optional[float] = None,
) -> SearchResult:
    """Redraw invalid cells; restart only when the board has no safe spot left."""
    return random_placement(
        n, seed, stop_on_invalid=False, debug=debug, observer=observer,
        time_limit=time_limit, strategy="random-propagation",
    )
