"""
Exception types raised by integral_ratios.
"""


class IntegralRatiosError(Exception):
    """Base class for all package errors."""


class InvalidInput(IntegralRatiosError, ValueError):
    """Ratio, mask and precision disagree in length, or are malformed."""


class UndefinedDomain(IntegralRatiosError, ValueError):
    """A ratio entry is not strictly positive."""


class NoApproximation(IntegralRatiosError, LookupError):
    """A derived accessor was used before the first committed step."""


class StateDecodeError(IntegralRatiosError, ValueError):
    """A compact state string could not be decoded."""
