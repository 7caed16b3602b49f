"""Disjoint-set union structures used by the percolation grid."""

from .weighted_union_find import WeightedQuickUnionUF

__all__ = ['WeightedQuickUnionUF']
