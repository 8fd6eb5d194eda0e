"""Configuration for position grouping and regression models."""

from .positions import (
    ATTACKING_CODES,
    BASELINE_POSITION,
    DEFENSIVE_CODES,
    EXCLUDED_CODES,
    POSITION_LEVELS,
    position_group,
)
from .regressions import RegressionSpec, Term, get_model_spec, iter_model_specs

__all__ = [
    "ATTACKING_CODES",
    "BASELINE_POSITION",
    "DEFENSIVE_CODES",
    "EXCLUDED_CODES",
    "POSITION_LEVELS",
    "RegressionSpec",
    "Term",
    "get_model_spec",
    "iter_model_specs",
    "position_group",
]
