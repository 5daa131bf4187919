"""Board representation shared by every search strategy.

The board does not hold a 2D grid. It keeps the set of queen locations and a
map from every attacked location to the number of queens that can reach it.
Both structures are kept in sync on every mutation, so safety checks and the
global conflict heuristic are cheap lookups.

Attack semantics
----------------
- A queen attacks along its row, its column and both diagonals, at any
  distance, through other queens. With three queens lined up in one row each
  of their cells is reached by the other two.
- A queen never contributes to the count of its own cell.

Heuristic
---------
``number_of_queens_under_attack`` is the sum, over every queen, of the number
of queens attacking its cell. Zero together with N placed queens means the
board is a valid solution. Boards order by this value: fewer conflicts ranks
higher, so the best board is the maximum of a max-heap.
"""

from __future__ import annotations

import random
from typing import Dict, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple

from .errors import DuplicateQueen, NoQueenHere, OutOfBounds

# Unit steps for the four diagonal rays.
_DIAGONALS = ((1, 1), (-1, 1), (1, -1), (-1, -1))


class Location(NamedTuple):
    """Immutable ``(x, y)`` cell coordinate; ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Board:
    """N x N board with incrementally maintained attack counts.

    Parameters
    ----------
    size : int
        Board dimension N. Fixed for the lifetime of the board.
    """

    __slots__ = ("_size", "_queens", "_attacks")

    def __init__(self, size: int):
        self._size = size
        self._queens: Set[Location] = set()
        self._attacks: Dict[Location, int] = {}

    # ------------------------------------------------------------------ factories

    @classmethod
    def with_queens_on_diagonal(cls, size: int) -> "Board":
        """Return a board with one queen on every cell ``(i, i)``."""
        board = cls(size)
        for i in range(size):
            board.add_queen(i, i)
        return board

    @classmethod
    def with_one_queen_per_column(cls, size: int, rng: random.Random) -> "Board":
        """Return a board with one queen per column on a shuffled, unique row.

        Parameters
        ----------
        size : int
            Board dimension N.
        rng : random.Random
            Generator driving the shuffle. Rows are a uniformly shuffled
            permutation of ``range(size)`` so no two queens share a row;
            diagonal conflicts are still possible.
        """
        rows = list(range(size))
        rng.shuffle(rows)
        board = cls(size)
        for column, row in enumerate(rows):
            board.add_queen(column, row)
        return board

    # ------------------------------------------------------------------ mutation

    def clear(self) -> None:
        """Remove every queen from the board."""
        self._queens.clear()
        self._attacks.clear()

    def add_queen(self, x: int, y: int) -> None:
        """Place a queen at ``(x, y)`` and record the cells it attacks.

        Raises
        ------
        OutOfBounds
            If ``(x, y)`` lies outside the board.
        DuplicateQueen
            If a queen already occupies ``(x, y)``.
        """
        location = Location(x, y)
        self._check_bounds(location)
        if location in self._queens:
            raise DuplicateQueen(x, y)
        self._queens.add(location)
        self._load_attacks(location)

    def remove_queen(self, x: int, y: int) -> None:
        """Remove the queen at ``(x, y)``.

        Attack counts are rebuilt from scratch over the remaining queens,
        which costs O(queens * N) per removal.

        Raises
        ------
        NoQueenHere
            If no queen occupies ``(x, y)``.
        """
        location = Location(x, y)
        if location not in self._queens:
            raise NoQueenHere(x, y)
        self._queens.remove(location)
        self._attacks.clear()
        for queen in self._queens:
            self._load_attacks(queen)

    def _load_attacks(self, queen: Location) -> None:
        """Increment the count of every cell reachable from ``queen``."""
        for cell in self._attacked_by(queen):
            self._attacks[cell] = self._attacks.get(cell, 0) + 1

    def _attacked_by(self, queen: Location) -> Iterator[Location]:
        n = self._size
        qx, qy = queen
        for x in range(n):
            if x != qx:
                yield Location(x, qy)
        for y in range(n):
            if y != qy:
                yield Location(qx, y)
        for dx, dy in _DIAGONALS:
            x, y = qx + dx, qy + dy
            while 0 <= x < n and 0 <= y < n:
                yield Location(x, y)
                x += dx
                y += dy

    # ------------------------------------------------------------------ queries

    @property
    def size(self) -> int:
        return self._size

    @property
    def queens(self) -> FrozenSet[Location]:
        """Read-only snapshot of the queen locations."""
        return frozenset(self._queens)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def _check_bounds(self, location: Location) -> None:
        if not self.in_bounds(location.x, location.y):
            raise OutOfBounds(location.x, location.y, self._size)

    def contains_queen(self, x: int, y: int) -> bool:
        """Return True if a queen occupies ``(x, y)``; raises ``OutOfBounds``."""
        location = Location(x, y)
        self._check_bounds(location)
        return location in self._queens

    def is_safe(self, x: int, y: int) -> bool:
        """Return True if no queen attacks ``(x, y)``; raises ``OutOfBounds``."""
        location = Location(x, y)
        self._check_bounds(location)
        return location not in self._attacks

    def number_of_queens_attacking_here(self, x: int, y: int) -> int:
        """Return how many queens reach ``(x, y)``; 0 for unattacked cells."""
        return self._attacks.get(Location(x, y), 0)

    def number_of_queens_under_attack(self) -> int:
        """Return the global conflict heuristic.

        Sums the attack count of every queen's own cell. Three queens lined up
        in one row contribute 2 each (queens attack through each other).
        """
        attacks = self._attacks
        return sum(attacks.get(queen, 0) for queen in self._queens)

    def total_queens(self) -> int:
        return len(self._queens)

    def contains_valid_spot(self) -> bool:
        """Return True if some cell is both unoccupied and unattacked."""
        blocked = len(self._attacks)
        blocked += sum(1 for queen in self._queens if queen not in self._attacks)
        return self._size * self._size - blocked != 0

    def available_positions(self) -> List[Location]:
        """Return every unoccupied cell in row-major order, attacked or not."""
        n = self._size
        queens = self._queens
        return [
            Location(x, y)
            for y in range(n)
            for x in range(n)
            if Location(x, y) not in queens
        ]

    def available_safe_positions(self) -> List[Location]:
        """Return every unoccupied, unattacked cell in row-major order."""
        n = self._size
        queens = self._queens
        attacks = self._attacks
        safe: List[Location] = []
        for y in range(n):
            for x in range(n):
                location = Location(x, y)
                if location not in queens and location not in attacks:
                    safe.append(location)
        return safe

    def canonical_key(self) -> FrozenSet[Location]:
        """Return an order-independent identifier of the queen set."""
        return frozenset(self._queens)

    def clone(self) -> "Board":
        """Return a deep copy; mutating it never affects this board."""
        board = Board(self._size)
        board._queens = set(self._queens)
        board._attacks = dict(self._attacks)
        return board

    # ------------------------------------------------------------------ protocol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._queens == other._queens

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Board") -> bool:
        # More conflicts ranks lower.
        return self.number_of_queens_under_attack() > other.number_of_queens_under_attack()

    def __gt__(self, other: "Board") -> bool:
        return self.number_of_queens_under_attack() < other.number_of_queens_under_attack()

    def __repr__(self) -> str:
        queens = sorted(self._queens)
        return f"Board(size={self._size}, queens={[tuple(q) for q in queens]})"

    def __str__(self) -> str:
        lines = []
        for y in range(self._size):
            cells = []
            for x in range(self._size):
                location = Location(x, y)
                if location in self._queens:
                    cells.append("Q")
                elif location in self._attacks:
                    cells.append("*")
                else:
                    cells.append("-")
            lines.append(" ".join(cells))
        return "\n".join(lines)


def board_from_queens(size: int, queens: Optional[Iterable[Tuple[int, int]]] = None) -> Board:
    """Build a board of ``size`` holding the given queen locations."""
    board = Board(size)
    for x, y in queens or ():
        board.add_queen(x, y)
    return board
