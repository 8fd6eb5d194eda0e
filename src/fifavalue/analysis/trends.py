"""Year-indexed pivots of the aggregate side tables."""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from fifavalue.config.columns import SKILL_COLUMNS
from fifavalue.config.positions import POSITION_LEVELS


def _ordered(columns: Iterable[str], preferred: Iterable[str]) -> List[str]:
    present = list(columns)
    head = [column for column in preferred if column in present]
    return head + sorted(column for column in present if column not in head)


def value_trend(value_trends: pd.DataFrame) -> pd.DataFrame:
    """Mean market value with one row per year and one column per position."""

    pivot = value_trends.pivot(index="year", columns="position", values="mean_value")
    pivot = pivot[_ordered(pivot.columns, POSITION_LEVELS)].sort_index()
    pivot.columns.name = None
    return pivot


def skill_trend(skill_trends: pd.DataFrame) -> pd.DataFrame:
    """Mean rating with one row per year and one column per skill."""

    pivot = skill_trends.pivot(index="year", columns="skill", values="mean_rating")
    pivot = pivot[_ordered(pivot.columns, SKILL_COLUMNS)].sort_index()
    pivot.columns.name = None
    return pivot
