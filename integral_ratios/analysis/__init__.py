"""Reports and error measures for computed convergents."""

from . import report
from .report import approximation_error, convergents_frame, format_scaled, masked_sum, scaled_values

__all__ = ["report", "approximation_error", "convergents_frame", "format_scaled", "masked_sum", "scaled_values"]
