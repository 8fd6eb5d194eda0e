"""Structured results handed from the analyzer to the reporting layer."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ColumnSummary(BaseModel):
    """Five-number summary extended with the mean."""

    minimum: float
    first_quartile: float
    median: float
    mean: float
    third_quartile: float
    maximum: float
    count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class TableSummary(BaseModel):
    columns: Dict[str, ColumnSummary]
    position_counts: Dict[str, int]
    n_rows: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class CoefficientEstimate(BaseModel):
    term: str
    estimate: float
    std_error: float
    t_value: float
    p_value: float

    model_config = ConfigDict(frozen=True)


class RegressionResult(BaseModel):
    """Outcome of one OLS fit; coefficients keep design-matrix order."""

    model: str
    formula: str
    coefficients: List[CoefficientEstimate]
    r_squared: float
    adj_r_squared: float
    f_statistic: float
    f_p_value: float
    df_model: int
    df_resid: int
    n_obs: int

    model_config = ConfigDict(frozen=True)

    def coefficient(self, term: str) -> CoefficientEstimate:
        for estimate in self.coefficients:
            if estimate.term == term:
                return estimate
        raise KeyError(f"Model {self.model!r} has no coefficient named {term!r}")

    def params(self) -> Dict[str, float]:
        return {estimate.term: estimate.estimate for estimate in self.coefficients}
