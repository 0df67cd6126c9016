"""
Specification subsystem for div2csv.

A specification is an ordered list of `ColumnSpec` entries.  The entry
named `root` (any case) is not an output column: its single XPath
selects the record fragments, and every other column is resolved
relative to each fragment.  `load_specification` reads one from a JSON
or YAML file and validates it.
"""

from .schema import ROOT_COLUMN, ColumnSpec, Specification  # noqa: F401
from .loader import load_specification, specification_from_data  # noqa: F401
