"""
Pivot selection, row reduction and candidate ranking.

These are the three stages of one engine step. They are pure functions over
the committed state: nothing passed in is modified.
"""

import math
from typing import List, Optional

from ..types import Candidate, MaskVector, PrecisionVector, RemainderVector, TransformMatrix


def find_pivots(
    x: RemainderVector,
    mask: MaskVector,
    precision: PrecisionVector
) -> List[int]:
    """
    Find the dimensions eligible to be reduced next.

    In exact arithmetic this is the smallest remainder. Because of floating
    noise, every remainder within its own tolerance of the minimum is also
    returned, in index order.

    Args:
        x: Remainder vector [N]
        mask: Enabled dimensions [N]
        precision: Per-dimension tolerance [N]

    Returns:
        Candidate pivot indices; empty once at most one dimension is left
    """
    length = len(x)
    eligible = [
        i for i in range(length)
        if mask[i] and x[i] > 0.0 and x[i] >= precision[i]
    ]

    if len(eligible) <= 1:
        return []

    smallest = min(float(x[i]) for i in eligible)
    return [i for i in eligible if x[i] < smallest + precision[i]]


def pivot_step(
    pivot: int,
    m: TransformMatrix,
    x: RemainderVector,
    precision: PrecisionVector
) -> Candidate:
    """
    Simulate the reduction of every other dimension against a pivot.

    Args:
        pivot: Pivot index
        m: Transform matrix [N, N]
        x: Remainder vector [N]
        precision: Per-dimension tolerance [N]

    Returns:
        Candidate holding the new pivot row, remainders and tolerances
    """
    x_new = x.copy()
    precision_new = precision.copy()
    row = m[pivot].copy()
    x_p = float(x[pivot])

    for i in range(len(x)):
        if i == pivot:
            continue

        # divmod of x[i] by x[pivot]
        x_i = float(x[i])
        quotient = math.floor(x_i / x_p)
        remainder = x_i - quotient * x_p

        # Close enough to the next multiple: the floor was off by one
        if remainder > x_p * (1.0 - precision[i]):
            quotient += 1
            remainder = 0.0
        elif remainder < 0.0:
            # x_i / x_p was rounded up onto the next integer
            remainder = 0.0

        precision_new[i] += quotient * precision[pivot]
        x_new[i] = remainder
        row += quotient * m[i]

    return Candidate(pivot, row, x_new, precision_new, float(row.sum()))


def rank_candidates(
    candidates: List[Candidate],
    last_pivot: Optional[int]
) -> Optional[Candidate]:
    """
    Choose the candidate to commit.

    The smallest row sum wins. The previous pivot is never chosen again
    right away, its row would not change.

    Args:
        candidates: Simulated candidates
        last_pivot: Most recently committed pivot, None before the first step

    Returns:
        Winning candidate, or None if no candidate is admissible
    """
    ranked = sorted(candidates, key=lambda c: c.row_sum)
    while ranked and ranked[0].pivot == last_pivot:
        ranked.pop(0)

    if not ranked:
        return None
    return ranked[0]
