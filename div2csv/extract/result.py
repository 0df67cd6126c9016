"""
Tabular result.

Holds the visible column names and the rows produced by the extractor.
A result is created empty, receives one row per processed record and is
handed to the CSV writer once extraction has finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass
class TabularResult:
    """Ordered columns and the rows extracted for them."""

    columns: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)
    skipped: int = 0

    def add_row(self, row: Dict[str, str]) -> None:
        if list(row) != self.columns:
            raise ValueError(f"Row columns {list(row)} do not match {self.columns}")
        self.rows.append(row)

    def records(self) -> Iterator[List[str]]:
        """Yield each row's values in column order."""
        for row in self.rows:
            yield [row[column] for column in self.columns]

    def __len__(self) -> int:
        return len(self.rows)
