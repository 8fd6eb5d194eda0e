"""Regression specifications for the market value models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from fifavalue.config.positions import BASELINE_POSITION


@dataclass(frozen=True)
class Term:
    """One predictor field; a term with a ``baseline`` is treated as categorical."""

    field: str
    baseline: Optional[str] = None

    @property
    def is_categorical(self) -> bool:
        return self.baseline is not None


@dataclass(frozen=True)
class RegressionSpec:
    name: str
    response: str
    terms: Tuple[Term, ...]

    @property
    def fields(self) -> Tuple[str, ...]:
        return (self.response, *(term.field for term in self.terms))

    def describe(self) -> str:
        rhs = " + ".join(term.field for term in self.terms) or "1"
        return f"{self.response} ~ {rhs}"


# Defending is left out of model_2 on purpose; the published coefficients
# were estimated on exactly this predictor set.
_MODEL_SPECS: Dict[str, RegressionSpec] = {
    "model_1": RegressionSpec(
        name="model_1",
        response="Value",
        terms=(Term("Position", baseline=BASELINE_POSITION),),
    ),
    "model_2": RegressionSpec(
        name="model_2",
        response="Value",
        terms=(
            Term("Position", baseline=BASELINE_POSITION),
            Term("Pace"),
            Term("Shooting"),
            Term("Passing"),
            Term("Dribbling"),
            Term("Strength"),
        ),
    ),
}


def iter_model_specs() -> Iterable[RegressionSpec]:
    """Return an iterator of all configured model specifications."""

    return _MODEL_SPECS.values()


def get_model_spec(name: str) -> RegressionSpec:
    """Fetch a model specification by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _MODEL_SPECS:
        raise KeyError(f"No regression model configured for name={name!r}")
    return _MODEL_SPECS[key]
