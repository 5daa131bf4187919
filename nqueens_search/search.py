"""Contract shared by every search strategy.

Every strategy takes the board size ``n`` plus its own parameters and returns
a ``SearchResult``. Sizes below ``MIN_SIZE`` fail immediately without any
search. Elapsed wall time is polled once per outer-loop iteration; outside
debug mode a run that exceeds ``time_limit`` seconds stops and reports
``found=False, timed_out=True``. A single expensive iteration can overrun the
budget: the limit is a polling bound, not a deadline.

In debug mode the time limit is ignored, elapsed time is not reported and each
visited board is handed to the caller's ``observer`` before the search
continues. Pacing belongs to the observer (see ``reporting.debug_printer``).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Callable, Optional

from . import settings
from .board import Board

logger = logging.getLogger(__name__)

MIN_SIZE = 4

Observer = Callable[[Board], None]

# Stands for an omitted time limit, read from settings when a run starts.
# None keeps its meaning of "no limit".
DEFAULT_LIMIT: Any = object()


@dataclass
class SearchResult:
    """Outcome of one strategy run.

    ``local_optimums``, ``steps`` and ``seed`` are ``None`` for strategies
    that have no such notion. ``elapsed`` is ``None`` in debug mode. The result
    is truthy exactly when a solution was found.
    """

    found: bool
    board: Optional[Board] = None
    configurations: int = 0
    elapsed: Optional[float] = None
    local_optimums: Optional[int] = None
    steps: Optional[int] = None
    seed: Optional[int] = None
    timed_out: bool = False
    strategy: str = ""

    def __bool__(self) -> bool:
        return self.found

    @property
    def size(self) -> Optional[int]:
        return self.board.size if self.board is not None else None


def is_supported_size(n: int) -> bool:
    """Return True for sizes the strategies accept; 1 through 3 are rejected."""
    return n >= MIN_SIZE


def unsupported(n: int, strategy: str, seed: Optional[int] = None) -> SearchResult:
    logger.info("%s: n=%d is below the supported minimum of %d", strategy, n, MIN_SIZE)
    return SearchResult(found=False, seed=seed, strategy=strategy)


def resolve_seed(seed: Optional[int]) -> int:
    """Return ``seed`` or, when it is None, a fresh 63-bit seed."""
    if seed is None:
        return random.SystemRandom().getrandbits(63)
    return seed


def resolve_time_limit(time_limit: Optional[float]) -> Optional[float]:
    """Return ``settings.DEFAULT_TIME_LIMIT`` for ``DEFAULT_LIMIT``, else ``time_limit``."""
    if time_limit is DEFAULT_LIMIT:
        return settings.DEFAULT_TIME_LIMIT
    return time_limit


class Stopwatch:
    """Wall-clock budget for one run.

    Parameters
    ----------
    time_limit : float | None
        Budget in seconds; None disables the limit and ``DEFAULT_LIMIT``
        takes the current ``settings.DEFAULT_TIME_LIMIT``.
    debug : bool
        Debug runs are never timed out and report no elapsed time.
    """

    def __init__(self, time_limit: Optional[float], debug: bool = False):
        self.time_limit = resolve_time_limit(time_limit)
        self.debug = debug
        self.start = perf_counter()

    def elapsed(self) -> float:
        return perf_counter() - self.start

    def expired(self) -> bool:
        if self.debug or self.time_limit is None:
            return False
        return self.elapsed() > self.time_limit

    def reported(self) -> Optional[float]:
        """Elapsed seconds for a result, or None in debug mode."""
        return None if self.debug else self.elapsed()


def notify(observer: Optional[Observer], debug: bool, board: Board) -> None:
    """Surface ``board`` to the observer when tracing."""
    if debug and observer is not None:
        observer(board)


def timed_out(strategy: str, stopwatch: Stopwatch, **counters) -> SearchResult:
    logger.info("%s: exceeded %s seconds", strategy, stopwatch.time_limit)
    return SearchResult(
        found=False,
        elapsed=stopwatch.reported(),
        timed_out=True,
        strategy=strategy,
        **counters,
    )
