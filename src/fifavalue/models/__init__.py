"""Typed records shared across ingestion, analysis and reporting."""

from .results import CoefficientEstimate, ColumnSummary, RegressionResult, TableSummary
from .trends import SkillTrendRow, ValueTrendRow

__all__ = [
    "CoefficientEstimate",
    "ColumnSummary",
    "RegressionResult",
    "SkillTrendRow",
    "TableSummary",
    "ValueTrendRow",
]
