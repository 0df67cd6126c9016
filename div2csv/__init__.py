"""
div2csv package.

Converts repeated HTML fragments ("records") into rows of a CSV file,
driven by a declarative specification that maps output columns to XPath
locators.  Each submodule implements one step of the pipeline:

1. **spec** – Load a specification file and validate it into a
   `Specification`: exactly one `root` column selecting the record
   fragments, plus the visible columns in output order.
2. **extract** – Parse the HTML document, walk every record fragment
   and resolve each column through its ordered locator list.  Values
   are cleaned by the sanitizer before they land in a `TabularResult`.
3. **output** – Serialize a finished `TabularResult` to CSV.
4. **run** – The run boundary.  Turns the errors raised by the stages
   above into a `RunOutcome` for the presentation layer.
5. **cli** – Command line entry point wiring together the above
   components.
"""

from importlib import metadata  # noqa: F401 (expose package version)

from .errors import (  # noqa: F401
    Div2CsvError,
    ExtractionFailed,
    InvalidSpecification,
    MissingRequiredColumn,
    NoRecordsFound,
    OutputWriteError,
)
