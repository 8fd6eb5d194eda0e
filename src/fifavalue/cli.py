"""Command-line interface for running the player value analysis."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from fifavalue.config_loader import DataPaths
from fifavalue.errors import AnalysisError
from fifavalue.pipeline import run_analysis
from fifavalue.report import format_report


logger = logging.getLogger(__name__)

_LOG_LEVEL_ENV = "FIFAVALUE_LOG_LEVEL"
_LOG_LEVEL_DEFAULT = "WARNING"


def _env_log_level() -> int:
    raw = os.getenv(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    logger.warning(
        "Invalid log level for %s: %s; using default %s", _LOG_LEVEL_ENV, raw, _LOG_LEVEL_DEFAULT
    )
    return logging.getLevelName(_LOG_LEVEL_DEFAULT)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze player market value by position")
    parser.add_argument(
        "players",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the per-player snapshot CSV",
    )
    parser.add_argument(
        "--value-trends",
        type=Path,
        default=None,
        help="Optional CSV of mean market value by year and position",
    )
    parser.add_argument(
        "--skill-trends",
        type=Path,
        default=None,
        help="Optional CSV of mean skill rating by year",
    )
    parser.add_argument(
        "--load-profile",
        type=Path,
        default=None,
        help="Load input locations from a JSON profile",
    )
    args = parser.parse_args(argv)
    if args.players is None and args.load_profile is None:
        parser.error("a players CSV or --load-profile is required")
    return args


def _resolve_paths(args: argparse.Namespace) -> DataPaths:
    if args.load_profile:
        profile = DataPaths.load(args.load_profile)
    else:
        profile = DataPaths(players=args.players)
    return DataPaths(
        players=args.players or profile.players,
        value_trends=args.value_trends or profile.value_trends,
        skill_trends=args.skill_trends or profile.skill_trends,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=_env_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = _parse_args(argv)

    try:
        paths = _resolve_paths(args)
        report = run_analysis(paths)
    except (AnalysisError, ValueError) as exc:
        logger.debug("Analysis aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
