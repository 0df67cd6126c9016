"""
Run boundary.

`convert` wires the stages together: load the specification, load the
document, extract the records and write the CSV.  Any `Div2CsvError`
raised along the way is caught here and returned as a failed
`RunOutcome`, so the caller decides how to report it.  Nothing is
written unless every record was extracted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import Div2CsvError, InvalidSpecification
from .extract.document import load_document
from .extract.records import ExtractionOptions, extract_records
from .extract.result import TabularResult
from .output.write_csv import write_table_csv
from .spec.loader import load_specification

logger = logging.getLogger(__name__)


@dataclass
class RunOptions:
    """Settings for a whole conversion run."""

    extraction: Optional[ExtractionOptions] = None
    encoding: Optional[str] = None


@dataclass
class RunOutcome:
    """Result of `convert`: either a written table or the error that stopped it."""

    ok: bool
    table: Optional[TabularResult] = None
    output_path: Optional[Path] = None
    error: Optional[Div2CsvError] = None


def convert(
    html_path: str | Path,
    spec_path: str | Path,
    output_path: str | Path,
    options: Optional[RunOptions] = None,
) -> RunOutcome:
    """Convert the records of an HTML file into a CSV file.

    Args:
        html_path: Input HTML document.
        spec_path: JSON or YAML specification file.
        output_path: Destination CSV file.
        options: Optional `RunOptions`.

    Returns:
        A `RunOutcome`.  On failure `error` holds the exception and no
        output file has been written.
    """
    options = options or RunOptions()
    try:
        specification = load_specification(spec_path)
        count = specification.visible_column_count
        if count == 0:
            raise InvalidSpecification("No columns defined in specification.")
        logger.info("Loaded specification with %d columns.", count)

        document = load_document(html_path, encoding=options.encoding)
        table = extract_records(document, specification, options.extraction)
        logger.info("Parsed %d records from HTML.", len(table))
        if table.skipped:
            logger.warning("Skipped %d records missing required columns.", table.skipped)

        write_table_csv(table, output_path)
    except Div2CsvError as exc:
        return RunOutcome(ok=False, error=exc)
    logger.info("CSV saved to %s", output_path)
    return RunOutcome(ok=True, table=table, output_path=Path(output_path))
