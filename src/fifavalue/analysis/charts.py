"""Tables that feed the report's distribution and position charts."""

from __future__ import annotations

from typing import Dict

import pandas as pd

from fifavalue.analysis.summary import column_summary, position_levels
from fifavalue.config.columns import POSITION_COLUMN, SKILL_COLUMNS, VALUE_COLUMN
from fifavalue.models import ColumnSummary


def skill_distributions(table: pd.DataFrame) -> pd.DataFrame:
    """Long-form ``skill, rating`` rows, one per player and skill."""

    return table[list(SKILL_COLUMNS)].melt(var_name="skill", value_name="rating")


def skill_means_by_position(table: pd.DataFrame) -> pd.DataFrame:
    """Mean of each skill per position level, rows in level order."""

    means = table.groupby(POSITION_COLUMN, observed=False)[list(SKILL_COLUMNS)].mean()
    means.index = means.index.astype(str)
    levels = position_levels(table[POSITION_COLUMN])
    return means.reindex(levels)


def value_by_position(table: pd.DataFrame) -> Dict[str, ColumnSummary]:
    """Five-number summary of ``Value`` per position; empty levels are omitted."""

    summaries: Dict[str, ColumnSummary] = {}
    for level in position_levels(table[POSITION_COLUMN]):
        values = table.loc[table[POSITION_COLUMN] == level, VALUE_COLUMN]
        if values.notna().any():
            summaries[level] = column_summary(values)
    return summaries
