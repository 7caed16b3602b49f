"""
Site Percolation - connectivity queries on an N x N percolation grid.

This package provides tools for:
- Opening sites one at a time on a square grid
- Checking whether a site is full (connected to the top row)
- Checking whether the grid percolates (top row connected to bottom row)
- Weighted quick-union disjoint sets backing both queries
"""

__version__ = "1.0.0"

from .disjoint_set import WeightedQuickUnionUF
from .percolation import PercolationGrid

__all__ = ['PercolationGrid', 'WeightedQuickUnionUF', '__version__']
