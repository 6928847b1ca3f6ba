"""
Parsing of user-typed values and their implied precision.
"""

import math
from decimal import Decimal
from typing import List, Sequence

from ..config import AlgorithmInput
from ..errors import InvalidInput

# Significant decimal digits a float64 carries
FLOAT_DIGITS = 15


def is_number_string(value_string: str) -> bool:
    """Check whether a string parses to a finite number."""
    try:
        return math.isfinite(float(value_string))
    except (TypeError, ValueError):
        return False


def parse_value(value_string: str) -> float:
    """
    Parse a typed value.

    Args:
        value_string: Decimal string, e.g. "3.14159"

    Returns:
        Parsed float

    Raises:
        InvalidInput: If the string is not a finite number
    """
    if not is_number_string(value_string):
        raise InvalidInput(f"Not a number: {value_string!r}")
    return float(value_string)


def precision_from_string(value_string: str) -> float:
    """
    Derive the absolute tolerance implied by the digits that were typed.

    The tolerance is half a unit of the least significant typed digit, so
    "3.14159" gives 5e-6 and "200" gives 50. A trailing zero after the
    decimal point marks the value as exact, which leaves only the float64
    resolution relative to the leading digit. Exponent notation follows the
    same rules on its mantissa, so "1e-3" gives 5e-4 and "1.50e2" is exact.

    Args:
        value_string: Decimal string as typed

    Returns:
        Half-unit tolerance
    """
    value_string = value_string.strip()
    if "e" in value_string.lower():
        return _precision_from_exponent_string(value_string)

    if "." in value_string:
        trailing_place = len(value_string.split(".")[1])
        leading_place = value_string.index(".")
        if value_string.endswith("0"):
            exponent = leading_place - FLOAT_DIGITS
        else:
            exponent = max(leading_place - FLOAT_DIGITS, -trailing_place)
    else:
        leading_place = len(value_string) - 1
        trailing_zeros = len(value_string) - len(value_string.rstrip("0"))
        exponent = max(leading_place - FLOAT_DIGITS, trailing_zeros)

    return 10.0 ** exponent / 2


def _precision_from_exponent_string(value_string: str) -> float:
    number = Decimal(value_string)
    mantissa = value_string.lower().split("e")[0]
    # float64 resolution relative to the leading digit
    float_floor = number.adjusted() + 1 - FLOAT_DIGITS
    if "." in mantissa and mantissa.endswith("0"):
        exponent = float_floor
    else:
        exponent = max(float_floor, number.as_tuple().exponent)

    return 10.0 ** exponent / 2


def algorithm_input_from_strings(
    value_strings: Sequence[str],
    mask: Sequence[bool]
) -> AlgorithmInput:
    """
    Build engine input from typed values.

    Args:
        value_strings: Decimal strings, one per dimension
        mask: Enabled dimensions

    Returns:
        AlgorithmInput with parsed ratio and implied precision
    """
    ratio: List[float] = [parse_value(s) for s in value_strings]
    precision: List[float] = [precision_from_string(s) for s in value_strings]
    return AlgorithmInput(ratio=ratio, mask=list(mask), precision=precision)
