"""N-Queens search strategies on a shared incremental board."""

from .board import Board, Location, board_from_queens
from .errors import (
    DuplicateQueen,
    EmptyQueueError,
    NoQueenHere,
    NQueensError,
    OutOfBounds,
    UnsupportedSize,
)
from .priority_queue import PriorityQueue
from .search import SearchResult
from .blind import blind_search_advanced, blind_search_intermediate, blind_search_naive
from .random_placement import completely_random, random_with_propagation
from .local_search import heuristic_search, min_conflict_search
from .explicit import explicit_board, explicit_solution
from .strategies import STRATEGIES, run_strategy
from .utils import conflicts, conflicts_on2, is_valid_solution

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Location",
    "board_from_queens",
    "PriorityQueue",
    "SearchResult",
    "NQueensError",
    "OutOfBounds",
    "DuplicateQueen",
    "NoQueenHere",
    "EmptyQueueError",
    "UnsupportedSize",
    "blind_search_naive",
    "blind_search_intermediate",
    "blind_search_advanced",
    "completely_random",
    "random_with_propagation",
    "min_conflict_search",
    "heuristic_search",
    "explicit_board",
    "explicit_solution",
    "STRATEGIES",
    "run_strategy",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
]
