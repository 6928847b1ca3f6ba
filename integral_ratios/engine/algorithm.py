"""
Simultaneous integer approximation of a ratio of real numbers.

Generalization of the continued fraction algorithm to N quantities: each
step reduces every dimension modulo the smallest remainder and emits the
accumulated integer row of the pivot.
"""

import logging
import numpy as np
from typing import Iterator, List, Optional

from ..config import AlgorithmInput
from ..errors import InvalidInput, NoApproximation, UndefinedDomain
from ..types import (
    Convergent,
    MaskVector,
    PrecisionVector,
    RatioVector,
    RemainderVector,
    TransformMatrix,
)
from .pivots import find_pivots, pivot_step, rank_candidates

LOG = logging.getLogger(__name__)


class Algorithm:
    """Stateful approximation engine, advanced one convergent per step."""

    def __init__(self, algorithm_input: Optional[AlgorithmInput] = None):
        """
        Initialize the engine.

        Args:
            algorithm_input: Ratio, mask and precision; defaults to AlgorithmInput()
        """
        self.set_input(algorithm_input if algorithm_input is not None else AlgorithmInput())

    def set_input(self, algorithm_input: AlgorithmInput) -> None:
        """
        Replace ratio, mask and precision, discarding all progress.

        Args:
            algorithm_input: New algorithm input

        Raises:
            InvalidInput: If lengths disagree, N < 2, or values are not finite
            UndefinedDomain: If a ratio entry is not strictly positive
        """
        ratio = np.array(algorithm_input.ratio, dtype=np.float64)
        mask = np.array(algorithm_input.mask, dtype=bool)
        precision = np.array(algorithm_input.precision, dtype=np.float64)

        if not (len(ratio) == len(mask) == len(precision)):
            raise InvalidInput(
                f"Ratio, mask and precision lengths differ: "
                f"{len(ratio)}, {len(mask)}, {len(precision)}"
            )
        if len(ratio) < 2:
            raise InvalidInput(f"At least 2 dimensions are required, got {len(ratio)}")
        if not np.all(np.isfinite(ratio)):
            raise InvalidInput(f"Ratio entries must be finite: {algorithm_input.ratio}")
        if not np.all(np.isfinite(precision)) or np.any(precision < 0):
            raise InvalidInput(f"Precision entries must be finite and non-negative: {algorithm_input.precision}")
        if np.any(ratio <= 0):
            raise UndefinedDomain(f"Ratio entries must be strictly positive: {algorithm_input.ratio}")

        self._ratio = ratio
        self._mask = mask
        self._input_precision = precision
        self.reset()

    def reset(self) -> None:
        """Restart from the held input."""
        length = len(self._ratio)
        self._m = np.identity(length, dtype=np.float64)
        self._x = self._ratio.copy()
        self._precision = self._input_precision.copy()
        self._pivot_sequence: List[int] = []
        self._finished = False

    def step(self) -> Optional[Convergent]:
        """
        Commit one pivot and return the new integer row.

        Returns:
            The next convergent, or None once converged
        """
        if self._finished:
            return None

        pivots = find_pivots(self._x, self._mask, self._precision)
        candidates = [pivot_step(p, self._m, self._x, self._precision) for p in pivots]
        winner = rank_candidates(candidates, self.current_pivot())

        if winner is None:
            self._finished = True
            LOG.info("Converged after %d steps", len(self._pivot_sequence))
            return None

        self._precision = winner.precision
        self._x = winner.remainders
        self._m[winner.pivot] = winner.row
        self._pivot_sequence.append(winner.pivot)

        return self._to_integers(winner.row)

    def run(self, max_steps: Optional[int] = None) -> Iterator[Convergent]:
        """
        Yield convergents until convergence.

        Args:
            max_steps: Stop after this many convergents (unbounded if None)

        Yields:
            Successive convergents
        """
        count = 0
        while max_steps is None or count < max_steps:
            result = self.step()
            if result is None:
                return
            count += 1
            yield result

    # Additional results

    def current_pivot(self) -> Optional[int]:
        """Most recently committed pivot, None before the first step."""
        if not self._pivot_sequence:
            return None
        return self._pivot_sequence[-1]

    def pivot_sequence(self) -> List[int]:
        """Pivots committed since the last reset, oldest first."""
        return list(self._pivot_sequence)

    def current_approximation(self) -> Convergent:
        """
        Matrix row at the current pivot, i.e. the last emitted convergent.

        Raises:
            NoApproximation: If no step has been committed yet
        """
        pivot = self.current_pivot()
        if pivot is None:
            raise NoApproximation("No step has been committed yet")
        return self._to_integers(self._m[pivot])

    def ratio_factor(self) -> float:
        """
        Scale between the current approximation and the input ratio.

        Only enabled dimensions contribute to either sum.

        Returns:
            sum(approximation[mask]) / sum(ratio[mask])
        """
        approximation = np.array(self.current_approximation(), dtype=np.float64)
        return float(approximation[self._mask].sum() / self._ratio[self._mask].sum())

    @property
    def finished(self) -> bool:
        """Whether the engine has converged."""
        return self._finished

    @property
    def length(self) -> int:
        """Number of dimensions N."""
        return len(self._ratio)

    @property
    def ratio(self) -> RatioVector:
        """Copy of the input ratio [N]."""
        return self._ratio.copy()

    @property
    def mask(self) -> MaskVector:
        """Copy of the enabled-dimension mask [N]."""
        return self._mask.copy()

    @property
    def precision(self) -> PrecisionVector:
        """Copy of the committed per-dimension tolerance [N]."""
        return self._precision.copy()

    @property
    def remainders(self) -> RemainderVector:
        """Copy of the committed remainder vector [N]."""
        return self._x.copy()

    @property
    def matrix(self) -> TransformMatrix:
        """Copy of the committed transform matrix [N, N]."""
        return self._m.copy()

    @staticmethod
    def _to_integers(row: np.ndarray) -> Convergent:
        return [int(v) for v in np.rint(row)]
