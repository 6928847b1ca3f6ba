"""Conversion of typed decimal strings into engine input."""

from .values import (
    algorithm_input_from_strings,
    is_number_string,
    parse_value,
    precision_from_string,
)

__all__ = [
    "algorithm_input_from_strings",
    "is_number_string",
    "parse_value",
    "precision_from_string",
]
