"""
Weighted quick-union with path compression over integer elements.

Elements are labeled 0..n-1 and stored in flat numpy arrays, so a set
member is just an integer index.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set union over n integer elements.

    Unions attach the smaller tree under the root of the larger one, and
    find() halves the path it walks, giving amortized near-constant time
    per operation.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements, labeled 0..n-1
        """
        if not isinstance(n, (int, np.integer)) or isinstance(n, (bool, np.bool_)):
            raise TypeError(f"n must be an integer, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        self.n = int(n)
        self.parent = np.arange(self.n, dtype=np.int64)
        self.size = np.ones(self.n, dtype=np.int64)
        self.count = self.n

    def __len__(self) -> int:
        return self.n

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise IndexError(f"index {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        """
        Return the representative of the set containing p.

        Args:
            p: Element index

        Returns:
            Root element of p's tree
        """
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the sets containing p and q.

        Args:
            p: First element
            q: Second element

        Returns:
            True if two sets were merged, False if p and q were already connected
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        size = self.size
        if size[root_p] < size[root_q]:
            root_p, root_q = root_q, root_p
        self.parent[root_q] = root_p
        size[root_p] += size[root_q]
        self.count -= 1
        return True

    def component_size(self, p: int) -> int:
        """Number of elements in the set containing p."""
        return int(self.size[self.find(p)])
