"""Position grouping used to collapse raw lineup codes into analysis levels."""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple


POSITION_LEVELS: Tuple[str, ...] = ("DEF", "MID", "ATK")
BASELINE_POSITION = "DEF"

ATTACKING_CODES: FrozenSet[str] = frozenset({"CF", "LF", "LS", "RF", "RS", "ST"})
DEFENSIVE_CODES: FrozenSet[str] = frozenset({"CB", "LB", "LCB", "RB", "RCB"})
# Goalkeepers, reserves and substitutes never reach the analysis table.
EXCLUDED_CODES: FrozenSet[str] = frozenset({"GK", "RES", "SUB"})

FALLBACK_POSITION = "MID"


def position_group(code: Optional[str]) -> Optional[str]:
    """Map a raw ``team_position`` code to DEF/MID/ATK, or ``None`` if excluded.

    The mapping is total: anything that is neither excluded, attacking nor
    defensive (a missing code included) lands in MID.
    """

    if code in EXCLUDED_CODES:
        return None
    if code in ATTACKING_CODES:
        return "ATK"
    if code in DEFENSIVE_CODES:
        return "DEF"
    return FALLBACK_POSITION
