import math

import pandas as pd
import pytest

from fifavalue.config import ATTACKING_CODES, DEFENSIVE_CODES, EXCLUDED_CODES
from fifavalue.transform import build_analysis_table, classify_position

_SKILLS = {"pace": 70, "shooting": 60, "passing": 65, "dribbling": 68, "defending": 40, "physic": 72}


def _raw(rows: list[dict]) -> pd.DataFrame:
    records = []
    for row in rows:
        record = {"team_position": None, "value_eur": 1_000_000, **_SKILLS}
        record.update(row)
        records.append(record)
    return pd.DataFrame.from_records(
        records,
        columns=["team_position", "value_eur", *_SKILLS.keys()],
    )


def test_classify_position_groups():
    for code in ATTACKING_CODES:
        assert classify_position(code) == "ATK"
    for code in DEFENSIVE_CODES:
        assert classify_position(code) == "DEF"
    for code in EXCLUDED_CODES:
        assert classify_position(code) is None


def test_classify_position_falls_back_to_mid():
    assert classify_position("CAM") == "MID"
    assert classify_position("LWB") == "MID"
    assert classify_position("XYZ") == "MID"
    assert classify_position(None) == "MID"
    assert classify_position(float("nan")) == "MID"


def test_excluded_positions_are_dropped():
    raw = _raw([
        {"team_position": "GK"},
        {"team_position": "RES"},
        {"team_position": "SUB"},
        {"team_position": "ST"},
    ])

    table = build_analysis_table(raw)
    assert len(table) == 1
    assert table["Position"].tolist() == ["ATK"]


def test_position_mapping_and_factor_order():
    raw = _raw([
        {"team_position": "LCB"},
        {"team_position": "RS"},
        {"team_position": "CDM"},
        {"team_position": None},
    ])

    table = build_analysis_table(raw)
    assert table["Position"].tolist() == ["DEF", "ATK", "MID", "MID"]
    assert list(table["Position"].cat.categories) == ["DEF", "MID", "ATK"]
    assert table["Position"].cat.ordered


def test_columns_are_renamed_and_ordered():
    table = build_analysis_table(_raw([{"team_position": "ST", "physic": 81}]))

    assert list(table.columns) == [
        "Position",
        "Value",
        "Pace",
        "Shooting",
        "Passing",
        "Dribbling",
        "Defending",
        "Strength",
    ]
    assert table.loc[0, "Strength"] == 81


def test_value_is_expressed_in_millions():
    raw = _raw([
        {"team_position": "ST", "value_eur": 105_500_000},
        {"team_position": "CB", "value_eur": 325_000},
        {"team_position": "CM", "value_eur": 0},
    ])

    table = build_analysis_table(raw)
    for raw_value, value in zip(raw["value_eur"], table["Value"]):
        assert math.isclose(value, raw_value / 1_000_000, abs_tol=1e-9)


def test_incomplete_rows_are_dropped():
    raw = _raw([
        {"team_position": "ST", "pace": None},
        {"team_position": "CB", "value_eur": None},
        {"team_position": "CM", "physic": None},
        {"team_position": "LS", "defending": None},
        {"team_position": "LB"},
    ])

    table = build_analysis_table(raw)
    assert len(table) == 1
    assert table["Position"].tolist() == ["DEF"]
    assert not table.isna().any().any()
    assert list(table.index) == [0]


def test_transform_is_pure_and_repeatable():
    raw = _raw([
        {"team_position": "ST", "value_eur": 12_000_000},
        {"team_position": "GK"},
        {"team_position": "RCB", "dribbling": None},
        {"team_position": "CAM", "value_eur": 4_500_000},
    ])
    snapshot = raw.copy()

    first = build_analysis_table(raw)
    second = build_analysis_table(raw)

    pd.testing.assert_frame_equal(first, second)
    pd.testing.assert_frame_equal(raw, snapshot)


@pytest.mark.parametrize("code", ["GK", "RES", "SUB"])
def test_all_excluded_yields_empty_table(code):
    table = build_analysis_table(_raw([{"team_position": code}]))
    assert table.empty
    assert "Position" in table.columns
