"""Input adapters that read the raw player and aggregate tables."""

from .tables import (
    RawInputs,
    load_inputs,
    load_player_table,
    load_skill_trends,
    load_value_trends,
)

__all__ = [
    "RawInputs",
    "load_inputs",
    "load_player_table",
    "load_skill_trends",
    "load_value_trends",
]
