"""Transformations from raw player rows to analysis rows."""

from .analysis_table import build_analysis_table, classify_position, position_dtype

__all__ = [
    "build_analysis_table",
    "classify_position",
    "position_dtype",
]
