"""
Core type definitions for integral_ratios package.
"""

import numpy as np
from typing import List, NamedTuple, Protocol
from typing_extensions import TypeAlias

# Core data types
RatioVector: TypeAlias = np.ndarray      # [N] float64, strictly positive
RemainderVector: TypeAlias = np.ndarray  # [N] float64, non-negative
MaskVector: TypeAlias = np.ndarray       # [N] bool
PrecisionVector: TypeAlias = np.ndarray  # [N] float64, non-negative
TransformMatrix: TypeAlias = np.ndarray  # [N, N] float64, whole-number rows
Convergent: TypeAlias = List[int]        # [N] integers


class Candidate(NamedTuple):
    """Result of simulating one pivot reduction."""
    pivot: int
    row: np.ndarray
    remainders: np.ndarray
    precision: np.ndarray
    row_sum: float


class SessionObserver(Protocol):
    """Protocol for listeners attached to a Session."""

    def on_inputs_changed(self) -> None:
        """Called after the input values or mask changed."""
        ...

    def on_finished(self, finished: bool) -> None:
        """Called when the converged flag flips."""
        ...

    def on_settings_changed(self) -> None:
        """Called after display settings changed."""
        ...

    def on_data_changed(self) -> None:
        """Called after new convergents were computed."""
        ...
