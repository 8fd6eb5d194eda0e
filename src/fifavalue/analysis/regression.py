"""Ordinary least squares fits for the market value models."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd
import statsmodels.api as sm
from pandas.api.types import is_numeric_dtype

from fifavalue.config.regressions import RegressionSpec, Term
from fifavalue.errors import InsufficientData, SchemaMismatch
from fifavalue.models import CoefficientEstimate, RegressionResult


logger = logging.getLogger(__name__)

INTERCEPT = "(Intercept)"


def _levels(series: pd.Series) -> List[Any]:
    if isinstance(series.dtype, pd.CategoricalDtype):
        return list(series.cat.categories)
    return sorted(series.dropna().unique(), key=str)


def _indicator_columns(series: pd.Series, term: Term) -> Dict[str, np.ndarray]:
    levels = _levels(series)
    if term.baseline not in levels:
        raise ValueError(
            f"Baseline {term.baseline!r} is not a level of {term.field!r} (levels: {levels})"
        )
    return {
        f"{term.field}{level}": (series == level).to_numpy(dtype="float64")
        for level in levels
        if level != term.baseline
    }


def build_design_matrix(table: pd.DataFrame, spec: RegressionSpec) -> Tuple[pd.Series, pd.DataFrame]:
    """Return the response and dense design matrix for ``spec``.

    The intercept comes first, then each term in order. Categorical terms
    expand to one indicator per non-baseline level, in level order. Rows with
    a missing value in any referenced field are dropped.
    """

    for field in spec.fields:
        if field not in table.columns:
            raise SchemaMismatch(
                f"Model {spec.name!r} references missing column {field!r}", column=field
            )

    data = table[list(spec.fields)].dropna()
    response = data[spec.response]
    if not is_numeric_dtype(response):
        raise SchemaMismatch(
            f"Response {spec.response!r} of model {spec.name!r} must be numeric",
            column=spec.response,
        )

    columns: Dict[str, np.ndarray] = {INTERCEPT: np.ones(len(data))}
    for term in spec.terms:
        series = data[term.field]
        if term.is_categorical:
            columns.update(_indicator_columns(series, term))
            continue
        if not is_numeric_dtype(series):
            raise SchemaMismatch(
                f"Predictor {term.field!r} of model {spec.name!r} must be numeric",
                column=term.field,
            )
        columns[term.field] = series.to_numpy(dtype="float64")

    design = pd.DataFrame(columns, index=data.index)
    return response.astype("float64"), design


def fit(table: pd.DataFrame, spec: RegressionSpec) -> RegressionResult:
    """Fit ``spec`` by OLS (QR decomposition) and collect classical inference.

    Standard errors, t values and two-sided p-values use the t distribution
    with ``n - k`` residual degrees of freedom.
    """

    response, design = build_design_matrix(table, spec)
    n_obs, n_params = design.shape
    if n_obs < n_params + 1:
        raise InsufficientData(
            f"Model {spec.name!r} needs at least {n_params + 1} complete rows, got {n_obs}",
            required=n_params + 1,
            available=n_obs,
        )
    rank = int(np.linalg.matrix_rank(design.to_numpy()))
    if rank < n_params:
        raise InsufficientData(
            f"Design matrix for model {spec.name!r} is singular (rank {rank} of {n_params})",
            required=n_params,
            available=rank,
        )

    results = sm.OLS(response, design).fit(method="qr")
    logger.debug(
        "Fitted %s (%s) on %d rows: R^2=%.4f", spec.name, spec.describe(), n_obs, results.rsquared
    )

    coefficients = [
        CoefficientEstimate(
            term=str(name),
            estimate=float(results.params[name]),
            std_error=float(results.bse[name]),
            t_value=float(results.tvalues[name]),
            p_value=float(results.pvalues[name]),
        )
        for name in design.columns
    ]
    return RegressionResult(
        model=spec.name,
        formula=spec.describe(),
        coefficients=coefficients,
        r_squared=float(results.rsquared),
        adj_r_squared=float(results.rsquared_adj),
        f_statistic=float(results.fvalue),
        f_p_value=float(results.f_pvalue),
        df_model=int(round(results.df_model)),
        df_resid=int(round(results.df_resid)),
        n_obs=n_obs,
    )
