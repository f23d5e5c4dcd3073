"""Output formatting helpers."""

from .formatter import (
    format_distance,
    format_time,
    optimization_result_to_csv,
    optimization_result_to_json,
)

__all__ = [
    "format_distance",
    "format_time",
    "optimization_result_to_csv",
    "optimization_result_to_json",
]
