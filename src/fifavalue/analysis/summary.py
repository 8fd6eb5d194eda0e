"""Descriptive statistics over the analysis table."""

from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np
import pandas as pd
from pandas.api.types import is_numeric_dtype

from fifavalue.config.columns import POSITION_COLUMN, SKILL_COLUMNS
from fifavalue.config.positions import POSITION_LEVELS
from fifavalue.errors import InsufficientData
from fifavalue.models import ColumnSummary, TableSummary


logger = logging.getLogger(__name__)

# Linear interpolation between order statistics, q(p) = x[(n - 1) * p]
# (Hyndman & Fan type 7, the pandas and R default).
QUANTILE_METHOD = "linear"


def column_summary(series: pd.Series) -> ColumnSummary:
    values = series.dropna().astype("float64")
    if values.empty:
        raise InsufficientData(
            f"Column {series.name!r} has no values to summarize", required=1, available=0
        )
    quartiles = values.quantile([0.25, 0.5, 0.75], interpolation=QUANTILE_METHOD)
    return ColumnSummary(
        minimum=float(values.min()),
        first_quartile=float(quartiles.iloc[0]),
        median=float(quartiles.iloc[1]),
        mean=float(values.mean()),
        third_quartile=float(quartiles.iloc[2]),
        maximum=float(values.max()),
        count=int(values.size),
    )


def position_levels(series: pd.Series) -> List[str]:
    if isinstance(series.dtype, pd.CategoricalDtype):
        return [str(level) for level in series.cat.categories]
    return list(POSITION_LEVELS)


def summarize(table: pd.DataFrame) -> TableSummary:
    """Summarize every numeric column and count rows per position level."""

    if table.empty:
        raise InsufficientData("Cannot summarize an empty table", required=1, available=0)

    columns: Dict[str, ColumnSummary] = {
        str(column): column_summary(table[column])
        for column in table.columns
        if is_numeric_dtype(table[column])
    }

    position_counts: Dict[str, int] = {}
    if POSITION_COLUMN in table.columns:
        counts = table[POSITION_COLUMN].value_counts()
        position_counts = {
            level: int(counts.get(level, 0)) for level in position_levels(table[POSITION_COLUMN])
        }

    return TableSummary(columns=columns, position_counts=position_counts, n_rows=len(table))


def correlate(table: pd.DataFrame) -> pd.DataFrame:
    """Pearson correlation matrix over the six skill columns, at full precision."""

    skills = table[list(SKILL_COLUMNS)].astype("float64")
    if len(skills) < 2:
        raise InsufficientData(
            "Correlation needs at least two rows", required=2, available=len(skills)
        )
    constant = [column for column in skills.columns if skills[column].nunique() < 2]
    if constant:
        raise InsufficientData(
            f"Correlation is undefined for constant skill columns: {constant}",
            required=2,
            available=1,
        )
    matrix = skills.corr(method="pearson").to_numpy()
    matrix = (matrix + matrix.T) / 2.0
    np.fill_diagonal(matrix, 1.0)
    return pd.DataFrame(matrix, index=list(SKILL_COLUMNS), columns=list(SKILL_COLUMNS))


def round_correlation(matrix: pd.DataFrame, decimals: int = 1) -> pd.DataFrame:
    """Display copy of a correlation matrix; the input keeps full precision."""

    return matrix.round(decimals)
