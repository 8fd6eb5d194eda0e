"""Statistical analysis over the analysis table and aggregate side tables."""

from .charts import skill_distributions, skill_means_by_position, value_by_position
from .regression import build_design_matrix, fit
from .summary import correlate, round_correlation, summarize
from .trends import skill_trend, value_trend

__all__ = [
    "build_design_matrix",
    "correlate",
    "fit",
    "round_correlation",
    "skill_distributions",
    "skill_means_by_position",
    "skill_trend",
    "summarize",
    "value_by_position",
    "value_trend",
]
