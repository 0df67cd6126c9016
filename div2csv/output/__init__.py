"""
Output subsystem for div2csv.

Writes a finished `TabularResult` to a CSV file.
"""

from .write_csv import write_table_csv  # noqa: F401
