"""Error kinds raised on misuse of the board and priority queue contracts.

None of these are expected during a correct search run: strategies only ever
add queens to empty in-range cells and only pop from non-empty queues. They
exist to surface programming errors close to their origin. Running out of
time is not an error and is reported through ``SearchResult`` instead.
"""

from __future__ import annotations


class NQueensError(Exception):
    """Base class for all errors raised by this package."""


class OutOfBounds(NQueensError, IndexError):
    """A coordinate lies outside ``[0, N)``."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Location ({x}, {y}) is outside a {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class DuplicateQueen(NQueensError, ValueError):
    """A queen was added onto an occupied cell."""

    def __init__(self, x: int, y: int):
        super().__init__(f"A queen already occupies ({x}, {y})")
        self.x = x
        self.y = y


class NoQueenHere(NQueensError, LookupError):
    """A queen was removed from an empty cell."""

    def __init__(self, x: int, y: int):
        super().__init__(f"No queen at ({x}, {y})")
        self.x = x
        self.y = y


class EmptyQueueError(NQueensError, IndexError):
    """The maximum was requested from an empty priority queue."""


class UnsupportedSize(NQueensError, ValueError):
    """The requested board size is below the supported minimum."""

    def __init__(self, size: int, minimum: int = 4):
        super().__init__(f"Number of queens should be at least {minimum}, got {size}")
        self.size = size
        self.minimum = minimum
