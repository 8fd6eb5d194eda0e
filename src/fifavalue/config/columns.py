"""Column vocabulary for the raw player table and the analysis table."""

from __future__ import annotations

from typing import Dict, Tuple


POSITION_CODE_COLUMN = "team_position"
RAW_VALUE_COLUMN = "value_eur"
RAW_SKILL_COLUMNS: Tuple[str, ...] = (
    "pace",
    "shooting",
    "passing",
    "dribbling",
    "defending",
    "physic",
)
PLAYER_COLUMNS: Tuple[str, ...] = (POSITION_CODE_COLUMN, RAW_VALUE_COLUMN, *RAW_SKILL_COLUMNS)

SKILL_RENAMES: Dict[str, str] = {
    "pace": "Pace",
    "shooting": "Shooting",
    "passing": "Passing",
    "dribbling": "Dribbling",
    "defending": "Defending",
    "physic": "Strength",
}
SKILL_COLUMNS: Tuple[str, ...] = tuple(SKILL_RENAMES[column] for column in RAW_SKILL_COLUMNS)

POSITION_COLUMN = "Position"
VALUE_COLUMN = "Value"
ANALYSIS_COLUMNS: Tuple[str, ...] = (POSITION_COLUMN, VALUE_COLUMN, *SKILL_COLUMNS)
NUMERIC_COLUMNS: Tuple[str, ...] = (VALUE_COLUMN, *SKILL_COLUMNS)

VALUE_UNIT = 1_000_000
RATING_RANGE: Tuple[int, int] = (1, 100)
