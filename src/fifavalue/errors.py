"""Error taxonomy for an analysis run; every condition here aborts the run."""

from __future__ import annotations

from pathlib import Path


class AnalysisError(RuntimeError):
    """Base class for conditions that abort an analysis run."""


class DataUnavailable(AnalysisError):
    """Raised when an input table is missing, unreadable or malformed."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class SchemaMismatch(DataUnavailable):
    """Raised when an expected column is absent or holds the wrong type."""

    def __init__(self, message: str, *, column: str, path: Path | None = None):
        super().__init__(message, path=path)
        self.column = column


class InsufficientData(AnalysisError):
    """Raised when too few complete rows remain for a computation."""

    def __init__(self, message: str, *, required: int, available: int):
        super().__init__(message)
        self.required = required
        self.available = available


__all__ = [
    "AnalysisError",
    "DataUnavailable",
    "InsufficientData",
    "SchemaMismatch",
]
