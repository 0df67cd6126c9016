"""
CSV writer for extracted tables.

Writes a header row with the visible column names followed by one row
per record.  Quoting follows RFC 4180 (fields containing the delimiter,
quotes or line breaks are quoted, rows end with CRLF) and every field
is trimmed.  Rows go to a temporary file next to the destination
which replaces it only once complete, so a failed write never leaves a
truncated CSV.  If the file already exists, it will be overwritten.
Unicode is written in UTF‑8 encoding.
"""

from __future__ import annotations

import csv
import logging
import os
import tempfile
from pathlib import Path

from ..errors import OutputWriteError
from ..extract.result import TabularResult

logger = logging.getLogger(__name__)


def write_table_csv(table: TabularResult, path: str | Path) -> None:
    """Write `table` to a CSV file.

    Args:
        table: A fully built `TabularResult`.
        path: Destination path for the CSV.

    Raises:
        OutputWriteError: if the file cannot be written.
    """
    path = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise OutputWriteError(f"Unable to save CSV: {exc}") from exc
    try:
        with open(fd, "w", newline="", encoding="utf-8") as csvfile:
            writer = csv.writer(csvfile, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
            writer.writerow([name.strip() for name in table.columns])
            for record in table.records():
                writer.writerow([value.strip() for value in record])
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        os.unlink(tmp_name)
        raise OutputWriteError(f"Unable to save CSV: {exc}") from exc
    logger.debug("Wrote %d rows to %s", len(table), path)
