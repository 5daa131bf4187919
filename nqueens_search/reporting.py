"""Console collaborators of the search strategies.

Strategies never print. This module renders boards, prints the final report
of a run, provides the slow-motion debug tracer used as a strategy observer,
and hosts the seed finder built on top of the heuristic search.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional

from . import settings
from .board import Board
from .local_search import heuristic_search
from .search import Observer, SearchResult

logger = logging.getLogger(__name__)


def render_board(board: Board) -> str:
    """Return the N x N grid: ``Q`` queen, ``*`` attacked, ``-`` empty."""
    return str(board)


def score_grid(board: Board) -> str:
    """Return the attack count of every cell as a grid."""
    n = board.size
    return "\n".join(
        " ".join(str(board.number_of_queens_attacking_here(x, y)) for x in range(n))
        for y in range(n)
    )


def queen_score_grid(board: Board) -> str:
    """Return the attack count of queen cells only; other cells show ``-``."""
    n = board.size
    rows: List[str] = []
    for y in range(n):
        cells = []
        for x in range(n):
            if board.contains_queen(x, y):
                cells.append(str(board.number_of_queens_attacking_here(x, y)))
            else:
                cells.append("-")
        rows.append(" ".join(cells))
    return "\n".join(rows)


def format_results(result: SearchResult, n: Optional[int] = None) -> str:
    """Build the multi-line report of a run.

    Fields that do not apply to the strategy are shown as ``n/a``; elapsed
    time is not measured in debug mode.
    """
    size = result.size if result.size is not None else n
    lines = []
    if size is not None:
        lines.append(f"N = {size}")
    if result.strategy:
        lines.append(f"Strategy:\t\t\t{result.strategy}")
    lines.append(f"Solution found:\t\t\t{'yes' if result.found else 'no'}")
    if result.timed_out:
        lines.append("Stopped:\t\t\ttime limit exceeded")
    if result.elapsed is None:
        lines.append("Time Elapsed:\t\t\tdebug mode, not measured")
    else:
        lines.append(f"Time Elapsed:\t\t\t{result.elapsed:.3f} seconds")
    lines.append(f"Configurations Attempted:\t{result.configurations}")
    lines.append(
        "Local Optimums Encountered:\t"
        + (str(result.local_optimums) if result.local_optimums is not None else "n/a")
    )
    lines.append(
        "Steps for Global Optimum:\t" + (str(result.steps) if result.steps is not None else "n/a")
    )
    lines.append("Seed used:\t\t\t" + (str(result.seed) if result.seed is not None else "none"))
    if result.board is not None:
        lines.append("")
        lines.append(render_board(result.board))
    return "\n".join(lines)


def print_results(result: SearchResult, n: Optional[int] = None) -> None:
    """Print the report produced by ``format_results``."""
    print(format_results(result, n))


def debug_printer(
    delay: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Observer:
    """Return an observer printing each board, then pausing ``delay`` seconds.

    The pause only paces the output for a human reader; it has no effect on
    the search itself. ``delay`` defaults to ``settings.DEBUG_DELAY``.
    """
    pause = settings.DEBUG_DELAY if delay is None else delay

    def observe(board: Board) -> None:
        print(render_board(board))
        print()
        if pause > 0:
            sleep(pause)

    return observe


def find_seed(
    n: int,
    time_limit: float,
    attempts: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Optional[int]:
    """Search for a seed letting ``heuristic_search`` solve ``n`` in time.

    Parameters
    ----------
    n : int
        Board size.
    time_limit : float
        Budget in seconds for each attempt.
    attempts : int | None
        Maximum number of seeds to try; None retries until one succeeds.
    rng : random.Random, optional
        Source of candidate seeds; defaults to system entropy.

    Returns
    -------
    int | None
        The first successful seed, or None when ``attempts`` ran out.
    """
    source = rng or random.SystemRandom()
    count = 0
    while attempts is None or count < attempts:
        count += 1
        seed = source.getrandbits(63)
        logger.info("Attempt %d (N = %d, T = %s): seed %d", count, n, time_limit, seed)
        if heuristic_search(n, seed=seed, time_limit=time_limit):
            logger.info("Seed %d solves N = %d within %s seconds", seed, n, time_limit)
            return seed
    return None
