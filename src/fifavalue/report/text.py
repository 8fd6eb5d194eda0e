"""Plain-text rendering of analysis results."""

from __future__ import annotations

from typing import List

import pandas as pd

from fifavalue.analysis import round_correlation
from fifavalue.models import RegressionResult, TableSummary
from fifavalue.pipeline import AnalysisReport

_SUMMARY_LABELS = {
    "minimum": "Min.",
    "first_quartile": "1st Qu.",
    "median": "Median",
    "mean": "Mean",
    "third_quartile": "3rd Qu.",
    "maximum": "Max.",
}


def _stars(p_value: float) -> str:
    if p_value < 0.001:
        return "***"
    if p_value < 0.01:
        return "**"
    if p_value < 0.05:
        return "*"
    if p_value < 0.1:
        return "."
    return ""


def format_summary(summary: TableSummary, *, decimals: int = 2) -> str:
    frame = pd.DataFrame(
        {
            column: [getattr(stats, field) for field in _SUMMARY_LABELS]
            for column, stats in summary.columns.items()
        },
        index=list(_SUMMARY_LABELS.values()),
    )
    counts = ", ".join(f"{level}: {count}" for level, count in summary.position_counts.items())
    lines = [
        f"Rows: {summary.n_rows}",
        f"Position counts: {counts}",
        frame.round(decimals).to_string(),
    ]
    return "\n".join(lines)


def format_correlation(matrix: pd.DataFrame, *, decimals: int = 1) -> str:
    return round_correlation(matrix, decimals).to_string()


def format_regression(result: RegressionResult, *, decimals: int = 4) -> str:
    frame = pd.DataFrame(
        [
            {
                "Estimate": coef.estimate,
                "Std. Error": coef.std_error,
                "t value": coef.t_value,
                "Pr(>|t|)": coef.p_value,
                "": _stars(coef.p_value),
            }
            for coef in result.coefficients
        ],
        index=[coef.term for coef in result.coefficients],
    )
    lines = [
        f"{result.model}: {result.formula}",
        frame.round(decimals).to_string(),
        (
            f"R-squared: {result.r_squared:.4f}, Adjusted R-squared: {result.adj_r_squared:.4f}"
        ),
        (
            f"F-statistic: {result.f_statistic:.2f} on {result.df_model} and "
            f"{result.df_resid} DF, p-value: {result.f_p_value:.4g}"
        ),
    ]
    return "\n".join(lines)


def format_report(report: AnalysisReport) -> str:
    """Render an ``AnalysisReport`` as a sequence of titled plain-text sections."""

    sections: List[str] = [
        "== Summary ==\n" + format_summary(report.summary),
        "== Skill correlation ==\n" + format_correlation(report.correlation),
    ]
    for result in report.models.values():
        sections.append("== Regression ==\n" + format_regression(result))
    if report.value_trend is not None:
        sections.append("== Mean value by year ==\n" + report.value_trend.round(2).to_string())
    if report.skill_trend is not None:
        sections.append("== Mean skill rating by year ==\n" + report.skill_trend.round(2).to_string())
    return "\n\n".join(sections)
