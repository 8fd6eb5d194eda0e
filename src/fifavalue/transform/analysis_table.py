"""Derive the analysis table from the raw player snapshot."""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from fifavalue.config.columns import (
    ANALYSIS_COLUMNS,
    NUMERIC_COLUMNS,
    POSITION_CODE_COLUMN,
    POSITION_COLUMN,
    RAW_SKILL_COLUMNS,
    RAW_VALUE_COLUMN,
    SKILL_RENAMES,
    VALUE_COLUMN,
    VALUE_UNIT,
)
from fifavalue.config.positions import POSITION_LEVELS, position_group


logger = logging.getLogger(__name__)


def classify_position(code: Optional[str]) -> Optional[str]:
    """Return DEF/MID/ATK for a raw code, or ``None`` when the row is excluded."""

    if code is None or (not isinstance(code, str) and pd.isna(code)):
        return position_group(None)
    return position_group(code)


def position_dtype() -> pd.CategoricalDtype:
    return pd.CategoricalDtype(categories=list(POSITION_LEVELS), ordered=True)


def build_analysis_table(players: pd.DataFrame) -> pd.DataFrame:
    """Filter, derive and rename the raw table into analysis rows.

    Goalkeepers, reserves and substitutes are dropped, ``Position`` is
    derived from ``team_position``, value is re-expressed in millions and any
    row missing ``Value`` or one of the six skills is dropped. The input frame
    is left untouched.
    """

    groups = players[POSITION_CODE_COLUMN].map(classify_position)
    kept = groups.notna()

    table = pd.DataFrame(
        {
            POSITION_COLUMN: pd.Categorical(groups[kept], dtype=position_dtype()),
            VALUE_COLUMN: players.loc[kept, RAW_VALUE_COLUMN].astype("float64") / VALUE_UNIT,
        },
        index=players.index[kept],
    )
    for column in RAW_SKILL_COLUMNS:
        table[SKILL_RENAMES[column]] = players.loc[kept, column].astype("float64")

    complete = table[list(NUMERIC_COLUMNS)].notna().all(axis=1)
    result = table.loc[complete, list(ANALYSIS_COLUMNS)].reset_index(drop=True)

    logger.debug(
        "Analysis table: %d raw rows, %d excluded by position, %d incomplete, %d kept",
        len(players),
        int((~kept).sum()),
        int((~complete).sum()),
        len(result),
    )
    return result
