"""Shared fixtures for the div2csv test suite."""

from __future__ import annotations

import pytest

from div2csv.extract.document import parse_document
from div2csv.spec.schema import ColumnSpec, Specification

LISTING_HTML = """
<html><body>
<ul id="items">
  <li class="item"><h2>First</h2><span class="tag">alpha</span><a href="/one">One<br/>Link</a></li>
  <li class="item"><h2>Second</h2><em class="tag">beta</em><a href="/two">Two</a></li>
  <li class="item"><h2>Third &nbsp;Item</h2><a href="/three"><b>Three</b></a></li>
</ul>
</body></html>
"""


@pytest.fixture
def listing_document():
    """Three list-item records; the third has no tag."""
    return parse_document(LISTING_HTML)


@pytest.fixture
def listing_spec() -> Specification:
    return Specification(
        [
            ColumnSpec(name="root", locators=["//li[@class='item']"]),
            ColumnSpec(name="title", required=True, locators=["./h2"]),
            ColumnSpec(name="tag", locators=["./span[@class='tag']", "./em[@class='tag']"]),
            ColumnSpec(name="link", locators=["./a"]),
        ]
    )
