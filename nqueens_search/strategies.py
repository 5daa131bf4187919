"""Registry of the search strategies under a uniform calling convention.

``run_strategy`` lets callers (CLI, benchmarks) pick a strategy by name and
pass the same arguments to every one of them; arguments a strategy has no use
for (a seed for a blind search) are dropped.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from .blind import blind_search_advanced, blind_search_intermediate, blind_search_naive
from .local_search import heuristic_search, min_conflict_search
from .random_placement import completely_random, random_with_propagation
from .search import DEFAULT_LIMIT, Observer, SearchResult

STRATEGIES: Dict[str, Callable[..., SearchResult]] = {
    "completely-random": completely_random,
    "random-propagation": random_with_propagation,
    "blind-naive": blind_search_naive,
    "blind-intermediate": blind_search_intermediate,
    "blind-advanced": blind_search_advanced,
    "min-conflict": min_conflict_search,
    "heuristic": heuristic_search,
}

# Strategies whose outcome depends on the seed.
RANDOMIZED = frozenset({"completely-random", "random-propagation", "min-conflict", "heuristic"})


def run_strategy(
    name: str,
    n: int,
    seed: Optional[int] = None,
    time_limit: Optional[float] = DEFAULT_LIMIT,
    debug: bool = False,
    observer: Optional[Observer] = None,
) -> SearchResult:
    """Run the strategy registered as ``name``.

    An omitted ``time_limit`` leaves each strategy on its own default: the
    current ``settings.DEFAULT_TIME_LIMIT``, or no limit for random placement.

    Raises
    ------
    ValueError
        If ``name`` is not a registered strategy.
    """
    try:
        search = STRATEGIES[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown strategy '{name}'. Allowed: {', '.join(STRATEGIES)}"
        ) from exc

    options: Dict[str, Any] = {"debug": debug, "observer": observer}
    if time_limit is not DEFAULT_LIMIT:
        options["time_limit"] = time_limit
    if name in RANDOMIZED:
        options["seed"] = seed
    return search(n, **options)
