from pathlib import Path

import pytest

from fifavalue.config_loader import DataPaths
from fifavalue.errors import DataUnavailable, SchemaMismatch
from fifavalue.ingest import load_inputs, load_player_table, load_skill_trends, load_value_trends

PLAYERS_CSV = """short_name,team_position,value_eur,pace,shooting,passing,dribbling,defending,physic
L. Messi,RW,67500000,85,92,91,95,38,65
V. van Dijk,LCB,75000000,76,60,71,72,91,86
J. Oblak,GK,120000000,,,,,,
A. Reserve,RES,500000,60,50,55,58,45,61
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_player_table_keeps_types(tmp_path: Path):
    path = _write(tmp_path, "players.csv", PLAYERS_CSV)

    frame = load_player_table(path)
    assert len(frame) == 4
    assert frame.loc[0, "team_position"] == "RW"
    assert frame.loc[1, "value_eur"] == 75_000_000
    assert frame["pace"].isna().sum() == 1
    assert "short_name" in frame.columns


def test_load_player_table_missing_file(tmp_path: Path):
    with pytest.raises(DataUnavailable) as excinfo:
        load_player_table(tmp_path / "nope.csv")
    assert excinfo.value.path == tmp_path / "nope.csv"


def test_load_player_table_empty_file(tmp_path: Path):
    path = _write(tmp_path, "players.csv", "")
    with pytest.raises(DataUnavailable):
        load_player_table(path)


def test_load_player_table_missing_column(tmp_path: Path):
    text = PLAYERS_CSV.replace(",physic", ",strength")
    path = _write(tmp_path, "players.csv", text)

    with pytest.raises(SchemaMismatch) as excinfo:
        load_player_table(path)
    assert excinfo.value.column == "physic"
    assert isinstance(excinfo.value, DataUnavailable)


def test_load_player_table_non_numeric_skill(tmp_path: Path):
    text = PLAYERS_CSV.replace("L. Messi,RW,67500000,85", "L. Messi,RW,67500000,fast")
    path = _write(tmp_path, "players.csv", text)

    with pytest.raises(SchemaMismatch) as excinfo:
        load_player_table(path)
    assert excinfo.value.column == "pace"


def test_load_player_table_warns_on_out_of_range(tmp_path: Path, caplog):
    text = PLAYERS_CSV.replace("L. Messi,RW,67500000,85", "L. Messi,RW,67500000,185")
    path = _write(tmp_path, "players.csv", text)

    with caplog.at_level("WARNING", logger="fifavalue.ingest.tables"):
        frame = load_player_table(path)
    assert frame.loc[0, "pace"] == 185
    assert "outside" in caplog.text


def test_load_value_trends_sorted(tmp_path: Path):
    path = _write(
        tmp_path,
        "value.csv",
        "year,position,mean_value\n2016,MID,2.1\n2015,DEF,1.5\n2015,ATK,3.25\n",
    )

    frame = load_value_trends(path)
    assert frame["year"].tolist() == [2015, 2015, 2016]
    assert frame["position"].tolist() == ["ATK", "DEF", "MID"]
    assert str(frame["year"].dtype) == "int64"


def test_load_value_trends_rejects_duplicates(tmp_path: Path):
    path = _write(
        tmp_path,
        "value.csv",
        "year,position,mean_value\n2015,DEF,1.5\n2015,DEF,1.7\n",
    )
    with pytest.raises(SchemaMismatch):
        load_value_trends(path)


def test_load_value_trends_invalid_value(tmp_path: Path):
    path = _write(tmp_path, "value.csv", "year,position,mean_value\n2015,DEF,lots\n")
    with pytest.raises(SchemaMismatch) as excinfo:
        load_value_trends(path)
    assert excinfo.value.column == "mean_value"


def test_load_skill_trends_long_form(tmp_path: Path):
    path = _write(
        tmp_path,
        "skills.csv",
        "year,skill,mean_rating\n2016,Pace,67.5\n2015,Pace,68.0\n2015,Shooting,52.1\n",
    )

    frame = load_skill_trends(path)
    assert list(frame.columns) == ["year", "skill", "mean_rating"]
    assert frame.iloc[0].tolist() == [2015, "Pace", 68.0]


def test_load_skill_trends_wide_form_is_melted(tmp_path: Path):
    path = _write(
        tmp_path,
        "skills.csv",
        "year,Pace,Shooting\n2015,68.0,52.1\n2016,67.5,53.0\n",
    )

    frame = load_skill_trends(path)
    assert len(frame) == 4
    assert set(frame["skill"]) == {"Pace", "Shooting"}
    shooting_2016 = frame[(frame["year"] == 2016) & (frame["skill"] == "Shooting")]
    assert shooting_2016["mean_rating"].iloc[0] == pytest.approx(53.0)


def test_load_skill_trends_without_skills(tmp_path: Path):
    path = _write(tmp_path, "skills.csv", "year\n2015\n")
    with pytest.raises(SchemaMismatch):
        load_skill_trends(path)


def test_load_inputs_optional_trends(tmp_path: Path):
    players = _write(tmp_path, "players.csv", PLAYERS_CSV)

    inputs = load_inputs(DataPaths(players=players))
    assert len(inputs.players) == 4
    assert inputs.value_trends is None
    assert inputs.skill_trends is None


def test_data_paths_profile_resolves_relative(tmp_path: Path):
    profile = _write(
        tmp_path,
        "profile.json",
        '{"players": "players.csv", "skill_trends": "/data/skills.csv"}',
    )

    paths = DataPaths.load(profile)
    assert paths.players == tmp_path / "players.csv"
    assert paths.value_trends is None
    assert paths.skill_trends == Path("/data/skills.csv")


def test_data_paths_profile_requires_players(tmp_path: Path):
    profile = _write(tmp_path, "profile.json", '{"value_trends": "value.csv"}')
    with pytest.raises(DataUnavailable):
        DataPaths.load(profile)


def test_data_paths_profile_round_trip(tmp_path: Path):
    profile = tmp_path / "profile.json"
    original = DataPaths(players=tmp_path / "players.csv", skill_trends=tmp_path / "skills.csv")

    original.save(profile)
    assert "value_trends" not in profile.read_text(encoding="utf-8")

    assert DataPaths.load(profile) == original
