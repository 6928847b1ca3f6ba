"""
Configuration classes for integral_ratios package.
"""

from pydantic import BaseModel, Field
from typing import List


class AlgorithmInput(BaseModel):
    """Numeric input of the approximation engine."""
    ratio: List[float] = Field(default_factory=lambda: [3.14159, 1.0])
    mask: List[bool] = Field(default_factory=lambda: [True, True])
    precision: List[float] = Field(default_factory=lambda: [1e-5, 1e-5])


class Settings(BaseModel):
    """Display settings of a session."""
    output_precision: int = Field(default=5, ge=1)  # Significant digits of scaled values
    show_pivot: bool = False


class ModelInput(BaseModel):
    """Values as typed by the user, before parsing."""
    value_strings: List[str] = Field(default_factory=lambda: ["3.14159", "1.0"])
    mask: List[bool] = Field(default_factory=lambda: [True, True])


class SessionConfig(BaseModel):
    """Behaviour of a session around the engine."""
    initial_lines: int = 10  # Lines computed on restart
    autocompute_limit: int = 20  # Only autocompute below this many dimensions
    default_value: str = "1.0"  # Value appended when the length grows
    state_version: str = "0.1.0"
