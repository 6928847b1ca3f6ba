"""Pivoting engine for simultaneous integer approximation."""

from .algorithm import Algorithm
from .pivots import find_pivots, pivot_step, rank_candidates

__all__ = ["Algorithm", "find_pivots", "pivot_step", "rank_candidates"]
