"""End-to-end analysis run: load, transform, analyze."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Optional, Sequence

import pandas as pd

from fifavalue.analysis import (
    correlate,
    fit,
    skill_distributions,
    skill_means_by_position,
    skill_trend,
    summarize,
    value_by_position,
    value_trend,
)
from fifavalue.config import RegressionSpec, iter_model_specs
from fifavalue.config_loader import DataPaths
from fifavalue.ingest import RawInputs, load_inputs
from fifavalue.models import ColumnSummary, RegressionResult, TableSummary
from fifavalue.transform import build_analysis_table


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    table: pd.DataFrame
    summary: TableSummary
    correlation: pd.DataFrame
    models: Dict[str, RegressionResult]
    skill_distributions: pd.DataFrame
    skill_means_by_position: pd.DataFrame
    value_by_position: Dict[str, ColumnSummary]
    value_trend: Optional[pd.DataFrame] = None
    skill_trend: Optional[pd.DataFrame] = None


def analyze(
    inputs: RawInputs,
    *,
    specs: Sequence[RegressionSpec] | None = None,
) -> AnalysisReport:
    """Run the transformer and every analysis over already loaded inputs."""

    table = build_analysis_table(inputs.players)
    summary = summarize(table)
    correlation = correlate(table)
    models = {spec.name: fit(table, spec) for spec in (specs or list(iter_model_specs()))}
    for name, result in models.items():
        logger.info("%s: n=%d R^2=%.3f", name, result.n_obs, result.r_squared)

    return AnalysisReport(
        table=table,
        summary=summary,
        correlation=correlation,
        models=models,
        skill_distributions=skill_distributions(table),
        skill_means_by_position=skill_means_by_position(table),
        value_by_position=value_by_position(table),
        value_trend=value_trend(inputs.value_trends) if inputs.value_trends is not None else None,
        skill_trend=skill_trend(inputs.skill_trends) if inputs.skill_trends is not None else None,
    )


def run_analysis(paths: DataPaths) -> AnalysisReport:
    return analyze(load_inputs(paths))
