"""Helpers to load the player snapshot and per-year aggregate CSVs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Type

import pandas as pd
from pandas.api.types import is_numeric_dtype
from pydantic import BaseModel, ValidationError

from fifavalue.config.columns import (
    PLAYER_COLUMNS,
    POSITION_CODE_COLUMN,
    RATING_RANGE,
    RAW_SKILL_COLUMNS,
    RAW_VALUE_COLUMN,
)
from fifavalue.config_loader import DataPaths
from fifavalue.errors import DataUnavailable, SchemaMismatch
from fifavalue.models import SkillTrendRow, ValueTrendRow


logger = logging.getLogger(__name__)

VALUE_TREND_COLUMNS = ("year", "position", "mean_value")
SKILL_TREND_COLUMNS = ("year", "skill", "mean_rating")


@dataclass(frozen=True)
class RawInputs:
    players: pd.DataFrame
    value_trends: Optional[pd.DataFrame] = None
    skill_trends: Optional[pd.DataFrame] = None


def _read_csv(path: Path) -> pd.DataFrame:
    path = Path(path)
    if not path.is_file():
        raise DataUnavailable(f"Input table {path} does not exist", path=path)
    try:
        frame = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        raise DataUnavailable(f"Input table {path} is empty", path=path) from None
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
        raise DataUnavailable(f"Unable to read input table {path}: {exc}", path=path) from exc
    frame.columns = [str(column).strip() for column in frame.columns]
    logger.debug("Read %d rows x %d columns from %s", len(frame), len(frame.columns), path)
    return frame


def _require_columns(frame: pd.DataFrame, columns: Iterable[str], *, path: Path) -> None:
    for column in columns:
        if column not in frame.columns:
            raise SchemaMismatch(
                f"Input table {path} is missing required column {column!r}",
                column=column,
                path=path,
            )


def _coerce_numeric(frame: pd.DataFrame, column: str, *, path: Path) -> pd.Series:
    series = frame[column]
    if is_numeric_dtype(series):
        return series
    try:
        return pd.to_numeric(series, errors="raise")
    except (TypeError, ValueError) as exc:
        raise SchemaMismatch(
            f"Column {column!r} in {path} must be numeric: {exc}",
            column=column,
            path=path,
        ) from exc


def _warn_out_of_range(frame: pd.DataFrame, columns: Sequence[str], *, path: Path) -> None:
    low, high = RATING_RANGE
    for column in columns:
        series = frame[column]
        outside = int(((series < low) | (series > high)).sum())
        if outside:
            logger.warning(
                "%d ratings in column %r of %s fall outside [%d, %d]",
                outside,
                column,
                path,
                low,
                high,
            )


def load_player_table(path: Path) -> pd.DataFrame:
    """Load the per-player season snapshot, keeping every column of the file.

    ``value_eur`` and the six skill columns are coerced to numbers (missing
    entries stay NaN); ``team_position`` must hold position codes.
    """

    path = Path(path)
    frame = _read_csv(path)
    _require_columns(frame, PLAYER_COLUMNS, path=path)

    codes = frame[POSITION_CODE_COLUMN]
    if is_numeric_dtype(codes) and codes.notna().any():
        raise SchemaMismatch(
            f"Column {POSITION_CODE_COLUMN!r} in {path} must hold position codes",
            column=POSITION_CODE_COLUMN,
            path=path,
        )

    frame = frame.copy()
    frame[POSITION_CODE_COLUMN] = codes.astype("object").where(codes.notna(), None)
    for column in (RAW_VALUE_COLUMN, *RAW_SKILL_COLUMNS):
        frame[column] = _coerce_numeric(frame, column, path=path)

    negative = int((frame[RAW_VALUE_COLUMN] < 0).sum())
    if negative:
        logger.warning("%d rows in %s have a negative %s", negative, path, RAW_VALUE_COLUMN)
    _warn_out_of_range(frame, RAW_SKILL_COLUMNS, path=path)
    return frame


def _validate_rows(
    frame: pd.DataFrame,
    model: Type[BaseModel],
    columns: Sequence[str],
    *,
    path: Path,
) -> pd.DataFrame:
    records = []
    for index, row in enumerate(frame[list(columns)].to_dict("records")):
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            location = exc.errors()[0].get("loc") or (columns[0],)
            column = str(location[0])
            raise SchemaMismatch(
                f"Row {index} of {path} has an invalid {column!r}: {exc.errors()[0]['msg']}",
                column=column,
                path=path,
            ) from exc
    validated = pd.DataFrame([record.model_dump() for record in records], columns=list(columns))
    validated["year"] = validated["year"].astype("int64")
    duplicated = validated.duplicated(subset=list(columns[:2]))
    if duplicated.any():
        first = validated.loc[duplicated, list(columns[:2])].iloc[0].tolist()
        raise SchemaMismatch(
            f"Input table {path} repeats the key {first}",
            column=columns[1],
            path=path,
        )
    return validated.sort_values(list(columns[:2]), kind="mergesort").reset_index(drop=True)


def load_value_trends(path: Path) -> pd.DataFrame:
    """Load mean market value by year and position (long form)."""

    path = Path(path)
    frame = _read_csv(path)
    _require_columns(frame, VALUE_TREND_COLUMNS, path=path)
    return _validate_rows(frame, ValueTrendRow, VALUE_TREND_COLUMNS, path=path)


def _melt_wide_skills(frame: pd.DataFrame, *, path: Path) -> pd.DataFrame:
    skill_columns = [column for column in frame.columns if column != "year"]
    if not skill_columns:
        raise SchemaMismatch(
            f"Input table {path} has no skill columns next to 'year'",
            column="skill",
            path=path,
        )
    return frame.melt(
        id_vars="year",
        value_vars=skill_columns,
        var_name="skill",
        value_name="mean_rating",
    )


def load_skill_trends(path: Path) -> pd.DataFrame:
    """Load mean skill rating by year, accepting long or wide files.

    Long files carry ``year, skill, mean_rating``; wide files carry ``year``
    plus one column per skill and are melted to the long layout.
    """

    path = Path(path)
    frame = _read_csv(path)
    _require_columns(frame, ("year",), path=path)
    if not {"skill", "mean_rating"}.issubset(frame.columns):
        frame = _melt_wide_skills(frame, path=path)
    return _validate_rows(frame, SkillTrendRow, SKILL_TREND_COLUMNS, path=path)


def load_inputs(paths: DataPaths) -> RawInputs:
    players = load_player_table(paths.players)
    value_trends = load_value_trends(paths.value_trends) if paths.value_trends else None
    skill_trends = load_skill_trends(paths.skill_trends) if paths.skill_trends else None
    logger.info(
        "Loaded %d player rows (value trends: %s, skill trends: %s)",
        len(players),
        "yes" if value_trends is not None else "no",
        "yes" if skill_trends is not None else "no",
    )
    return RawInputs(players=players, value_trends=value_trends, skill_trends=skill_trends)
