"""
Integral Ratios: simultaneous integer approximation of real-valued ratios
"""

__version__ = "0.1.0"

from . import engine, parsing, session, analysis
from .config import AlgorithmInput, ModelInput, SessionConfig, Settings
from .engine import Algorithm
from .errors import (
    IntegralRatiosError,
    InvalidInput,
    NoApproximation,
    StateDecodeError,
    UndefinedDomain,
)
from .session import BaseObserver, Session
from .types import Convergent, SessionObserver

__all__ = [
    "engine",
    "parsing",
    "session",
    "analysis",
    "Algorithm",
    "AlgorithmInput",
    "ModelInput",
    "SessionConfig",
    "Settings",
    "Session",
    "BaseObserver",
    "SessionObserver",
    "Convergent",
    "IntegralRatiosError",
    "InvalidInput",
    "NoApproximation",
    "StateDecodeError",
    "UndefinedDomain",
]
