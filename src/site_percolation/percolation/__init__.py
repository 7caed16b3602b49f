"""Site percolation on square grids."""

from .grid import PercolationGrid

__all__ = ['PercolationGrid']
