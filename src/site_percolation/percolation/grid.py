"""
Site percolation on an N x N grid.

Sites are addressed by 1-based (row, column) pairs and stored in a flat
array at index n * (row - 1) + (column - 1). Two disjoint-set structures
track connectivity between open sites:

- ``connectivity`` holds a virtual top node (index n*n) and a virtual
  bottom node (index n*n + 1) and answers percolates().
- ``fullness`` holds only the virtual top node and answers is_full().

Keeping the bottom node out of ``fullness`` prevents backwash: once the
grid percolates, open bottom-row sites would otherwise all look full via
the virtual bottom node.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..disjoint_set import WeightedQuickUnionUF

logger = logging.getLogger(__name__)

# up, right, down, left
NEIGHBOR_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class PercolationGrid:
    """
    N x N grid of sites, all initially closed, opened one at a time.

    Example:
        grid = PercolationGrid(3)
        grid.open(1, 2)
        grid.open(2, 2)
        grid.open(3, 2)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an empty grid.

        Args:
            n: Grid dimension, must be at least 1
        """
        if not _is_integer(n):
            raise TypeError(f"n must be an integer, got {type(n).__name__}")
        if n <= 0:
            raise ValueError(f"n must be greater than zero, got {n}")

        self.n = int(n)
        self.top = self.n * self.n
        self.bottom = self.n * self.n + 1

        self.open_sites = np.zeros(self.n * self.n, dtype=bool)
        self._n_open = 0

        self.connectivity = WeightedQuickUnionUF(self.n * self.n + 2)
        self.fullness = WeightedQuickUnionUF(self.n * self.n + 1)

        logger.debug("Created %dx%d percolation grid", self.n, self.n)

    def __repr__(self) -> str:
        return (f"PercolationGrid(n={self.n}, open={self._n_open}, "
                f"percolates={self.percolates()})")

    # =========================================================================
    # Indexing and validation
    # =========================================================================

    def is_valid(self, i: int, j: int) -> bool:
        """Whether (i, j) addresses a site of this grid."""
        return _is_integer(i) and _is_integer(j) and 1 <= i <= self.n and 1 <= j <= self.n

    def _validate(self, i: int, j: int) -> None:
        if not (_is_integer(i) and _is_integer(j)):
            raise TypeError(f"site coordinates must be integers, got ({i!r}, {j!r})")
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise ValueError(
                f"site ({i}, {j}) is out of bounds for a {self.n} x {self.n} grid"
            )

    def _index(self, i: int, j: int) -> int:
        return self.n * (i - 1) + (j - 1)

    def neighbors(self, i: int, j: int) -> List[Tuple[int, int]]:
        """
        In-bounds neighbors of a site.

        Args:
            i: Row, 1-based
            j: Column, 1-based

        Returns:
            Coordinates in the order up, right, down, left, skipping any
            that fall off the grid
        """
        self._validate(i, j)
        return [(i + di, j + dj) for di, dj in NEIGHBOR_OFFSETS
                if self.is_valid(i + di, j + dj)]

    # =========================================================================
    # Mutation
    # =========================================================================

    def _union(self, p: int, q: int) -> None:
        self.connectivity.union(p, q)
        self.fullness.union(p, q)

    def open(self, i: int, j: int) -> None:
        """
        Open site (i, j) and connect it to its open neighbors.

        Opening an already open site does nothing. Top-row sites join the
        virtual top in both structures; bottom-row sites join the virtual
        bottom in ``connectivity`` only.

        Args:
            i: Row, 1-based
            j: Column, 1-based
        """
        self._validate(i, j)
        idx = self._index(i, j)
        if self.open_sites[idx]:
            return

        was_percolating = self.percolates()

        self.open_sites[idx] = True
        self._n_open += 1

        if i == 1:
            self._union(self.top, idx)
        if i == self.n:
            self.connectivity.union(self.bottom, idx)

        for ni, nj in self.neighbors(i, j):
            nidx = self._index(ni, nj)
            if self.open_sites[nidx]:
                self._union(nidx, idx)

        if not was_percolating and self.percolates():
            logger.debug("Grid percolates after opening (%d, %d); %d of %d sites open",
                         i, j, self._n_open, self.n * self.n)

    # =========================================================================
    # Queries
    # =========================================================================

    def is_open(self, i: int, j: int) -> bool:
        self._validate(i, j)
        return bool(self.open_sites[self._index(i, j)])

    def is_full(self, i: int, j: int) -> bool:
        """
        Whether site (i, j) is connected to the top row through open sites.

        Answered from ``fullness``, which has no virtual bottom node, so the
        result is unaffected by whether the grid percolates.
        """
        self._validate(i, j)
        return self.fullness.connected(self._index(i, j), self.top)

    def percolates(self) -> bool:
        return self.connectivity.connected(self.top, self.bottom)

    def number_of_open_sites(self) -> int:
        return self._n_open

    def open_fraction(self) -> float:
        """Fraction of sites that are open."""
        return self._n_open / (self.n * self.n)

    def render(self) -> str:
        """
        Text snapshot of the grid, one line per row.

        Returns:
            String using '#' for closed, 'o' for open and '*' for full sites
        """
        rows = []
        for i in range(1, self.n + 1):
            cells = []
            for j in range(1, self.n + 1):
                if self.is_full(i, j):
                    cells.append('*')
                elif self.is_open(i, j):
                    cells.append('o')
                else:
                    cells.append('#')
            rows.append(''.join(cells))
        return '\n'.join(rows)
