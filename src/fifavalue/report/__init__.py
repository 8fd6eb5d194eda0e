"""Reporting helpers that turn analysis results into text."""

from .text import format_correlation, format_regression, format_report, format_summary

__all__ = [
    "format_correlation",
    "format_regression",
    "format_report",
    "format_summary",
]
