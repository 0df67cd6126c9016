"""
Extraction subsystem for div2csv.

Parses the input HTML with lxml, selects the record fragments with the
root locator and resolves every visible column of every record into a
sanitized string.  The rows are collected in a `TabularResult` in
document order.
"""

from .document import load_document, parse_document  # noqa: F401
from .records import EMPTY_VALUE, ExtractionOptions, extract_records  # noqa: F401
from .result import TabularResult  # noqa: F401
from .sanitize import sanitize, summarize  # noqa: F401
