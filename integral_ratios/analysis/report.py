"""
Tabular reports of computed convergents.
"""

import numpy as np
import pandas as pd
from typing import List, Sequence

from ..session import Session


def masked_sum(values: Sequence[float], mask: Sequence[bool]) -> float:
    """Sum of the enabled entries."""
    return float(np.asarray(values, dtype=np.float64)[np.asarray(mask, dtype=bool)].sum())


def scaled_values(ratio: Sequence[float], factor: float) -> np.ndarray:
    """
    Reconstruct the input at the scale of a convergent.

    Args:
        ratio: Input ratio [N]
        factor: Ratio factor of the convergent

    Returns:
        ratio * factor [N]
    """
    return np.asarray(ratio, dtype=np.float64) * factor


def approximation_error(
    ratio: Sequence[float],
    convergent: Sequence[int],
    mask: Sequence[bool]
) -> np.ndarray:
    """
    Relative error of a convergent against the scaled input.

    Args:
        ratio: Input ratio [N]
        convergent: Integer approximation [N]
        mask: Enabled dimensions [N]

    Returns:
        (convergent - scaled) / scaled per dimension [N]
    """
    factor = masked_sum(convergent, mask) / masked_sum(ratio, mask)
    scaled = scaled_values(ratio, factor)
    return (np.asarray(convergent, dtype=np.float64) - scaled) / scaled


def format_scaled(values: Sequence[float], digits: int) -> List[str]:
    """Format values with a fixed number of significant digits."""
    return [format(float(v), f"#.{digits}g") for v in values]


def convergents_frame(session: Session) -> pd.DataFrame:
    """
    Collect the convergents computed so far.

    Args:
        session: Session with computed lines

    Returns:
        DataFrame with one row per convergent: integer columns x0..x{N-1},
        the ratio factor, the pivot and the largest relative error over
        the enabled dimensions
    """
    outputs = session.ratio_outputs
    columns = [f"x{i}" for i in range(session.length)]

    if not outputs:
        return pd.DataFrame(columns=columns + ["factor", "pivot", "max_rel_error"])

    df = pd.DataFrame(outputs, columns=columns, dtype=np.int64)
    df["factor"] = session.ratio_scalars
    df["pivot"] = session.pivots

    ratio, mask = session.values, session.mask
    enabled = np.asarray(mask, dtype=bool)
    df["max_rel_error"] = [
        float(np.abs(approximation_error(ratio, row, mask)[enabled]).max())
        for row in outputs
    ]

    return df
