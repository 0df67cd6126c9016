"""
Error types raised by the div2csv pipeline.

Every failure is fatal to the current run.  The stages raise these at
the point of failure and `div2csv.run.convert` is the only place that
catches them.
"""

from __future__ import annotations

from typing import Optional


class Div2CsvError(Exception):
    """Base class for all div2csv errors."""


class InvalidSpecification(Div2CsvError):
    """The specification is structurally invalid or could not be loaded."""


class NoRecordsFound(Div2CsvError):
    """The root locator produced no usable record fragments."""

    def __init__(self, message: str = "No records found from specified root.") -> None:
        super().__init__(message)


class MissingRequiredColumn(Div2CsvError):
    """A required column had no locator match in a record."""

    def __init__(self, column: str, record_index: int, context: str = "") -> None:
        self.column = column
        self.record_index = record_index
        self.context = context
        message = f"Required column '{column}' is missing in record {record_index}"
        if context:
            message += f" ('{context}')"
        super().__init__(message)


class ExtractionFailed(Div2CsvError):
    """The document could not be loaded or a locator failed to evaluate."""

    def __init__(
        self,
        message: str,
        *,
        column: Optional[str] = None,
        record_index: Optional[int] = None,
    ) -> None:
        self.column = column
        self.record_index = record_index
        where = []
        if record_index is not None:
            where.append(f"record {record_index}")
        if column is not None:
            where.append(f"column '{column}'")
        if where:
            message = f"{message} ({', '.join(where)})"
        super().__init__(message)


class OutputWriteError(Div2CsvError):
    """The CSV output could not be written."""
