"""Tests for the record extractor."""

from __future__ import annotations

import pytest

from div2csv.errors import ExtractionFailed, InvalidSpecification, MissingRequiredColumn, NoRecordsFound
from div2csv.extract.document import parse_document
from div2csv.extract.records import EMPTY_VALUE, ExtractionOptions, extract_records
from div2csv.spec.schema import ColumnSpec, Specification


def test_one_row_per_record_in_document_order(listing_document, listing_spec) -> None:
    table = extract_records(listing_document, listing_spec)
    assert table.columns == ["title", "tag", "link"]
    assert [row["title"] for row in table.rows] == ["First", "Second", "Third Item"]


def test_first_matching_locator_wins(listing_document, listing_spec) -> None:
    table = extract_records(listing_document, listing_spec)
    # record 0 matches the first locator, record 1 only the second
    assert [row["tag"] for row in table.rows][:2] == ["alpha", "beta"]


def test_optional_column_without_match_is_empty_sentinel(listing_document, listing_spec) -> None:
    table = extract_records(listing_document, listing_spec)
    assert table.rows[2]["tag"] == EMPTY_VALUE == "<empty>"


def test_links_keep_href_with_clean_text(listing_document, listing_spec) -> None:
    table = extract_records(listing_document, listing_spec)
    links = [row["link"] for row in table.rows]
    assert links[0] == '<a href="/one">OneLink</a>'
    assert links[2] == '<a href="/three">Three</a>'


def test_link_text_is_sanitized_with_strip_terms() -> None:
    doc = parse_document('<div><p><a class="x" href="/x">Foo<br/>Bar NEW</a></p></div>')
    spec = Specification(
        [
            ColumnSpec(name="root", locators=["//p"]),
            ColumnSpec(name="link", locators=["./a"], strip=["new"]),
        ]
    )
    cell = extract_records(doc, spec).rows[0]["link"]
    assert 'href="/x"' in cell
    assert 'class="x"' in cell
    assert ">FooBar</a>" in cell


def test_attribute_locator_yields_plain_value(listing_document) -> None:
    spec = Specification(
        [ColumnSpec(name="root", locators=["//li"]), ColumnSpec(name="href", locators=["./a/@href"])]
    )
    table = extract_records(listing_document, spec)
    assert [row["href"] for row in table.rows] == ["/one", "/two", "/three"]


def test_missing_required_column_aborts_run() -> None:
    doc = parse_document(
        "<ul><li><h2>A</h2><i>x</i></li><li><p>no title here</p></li><li><h2>C</h2></li></ul>"
    )
    spec = Specification(
        [
            ColumnSpec(name="root", locators=["//li"]),
            ColumnSpec(name="title", required=True, locators=["./h2"]),
            ColumnSpec(name="tag", locators=["./i", "./b"]),
        ]
    )
    with pytest.raises(MissingRequiredColumn) as excinfo:
        extract_records(doc, spec)
    assert excinfo.value.column == "title"
    assert excinfo.value.record_index == 1
    assert excinfo.value.context == "no title here"


def test_missing_required_context_is_bounded() -> None:
    doc = parse_document("<div><section>" + "lorem ipsum " * 200 + "</section></div>")
    spec = Specification(
        [ColumnSpec(name="root", locators=["//section"]), ColumnSpec(name="t", required=True, locators=["./h1"])]
    )
    with pytest.raises(MissingRequiredColumn) as excinfo:
        extract_records(doc, spec, ExtractionOptions(context_chars=30))
    assert len(excinfo.value.context) <= 30


def test_skip_mode_drops_only_invalid_records() -> None:
    doc = parse_document("<ul><li><h2>A</h2></li><li><p>x</p></li><li><h2>C</h2></li></ul>")
    spec = Specification(
        [ColumnSpec(name="root", locators=["//li"]), ColumnSpec(name="title", required=True, locators=["./h2"])]
    )
    table = extract_records(doc, spec, ExtractionOptions(on_missing_required="skip"))
    assert [row["title"] for row in table.rows] == ["A", "C"]
    assert table.skipped == 1


def test_skip_mode_with_every_record_invalid() -> None:
    doc = parse_document("<ul><li><p>x</p></li></ul>")
    spec = Specification(
        [ColumnSpec(name="root", locators=["//li"]), ColumnSpec(name="title", required=True, locators=["./h2"])]
    )
    with pytest.raises(NoRecordsFound):
        extract_records(doc, spec, ExtractionOptions(on_missing_required="skip"))


def test_unknown_skip_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        ExtractionOptions(on_missing_required="retry")


def test_root_without_matches(listing_document) -> None:
    spec = Specification([ColumnSpec(name="root", locators=["//table"]), ColumnSpec(name="t", locators=["./td"])])
    with pytest.raises(NoRecordsFound):
        extract_records(listing_document, spec)


def test_computed_locator_value_fails(listing_document) -> None:
    spec = Specification(
        [ColumnSpec(name="root", locators=["//li"]), ColumnSpec(name="count", locators=["count(./h2)"])]
    )
    with pytest.raises(ExtractionFailed) as excinfo:
        extract_records(listing_document, spec)
    assert excinfo.value.column == "count"
    assert excinfo.value.record_index == 0


def test_root_must_select_elements(listing_document) -> None:
    spec = Specification([ColumnSpec(name="root", locators=["//li/@class"]), ColumnSpec(name="t", locators=["."])])
    with pytest.raises(ExtractionFailed, match="must select elements"):
        extract_records(listing_document, spec)


def test_invalid_specification_is_checked_before_extraction(listing_document) -> None:
    spec = Specification([ColumnSpec(name="t", locators=["./h2"])])
    with pytest.raises(InvalidSpecification):
        extract_records(listing_document, spec)


def test_locator_failing_at_evaluation(listing_document) -> None:
    spec = Specification(
        [
            ColumnSpec(name="root", locators=["//li"]),
            ColumnSpec(name="title", locators=["./h2"]),
            ColumnSpec(name="t", locators=["$undefined"]),
        ]
    )
    with pytest.raises(ExtractionFailed, match="failed") as excinfo:
        extract_records(listing_document, spec)
    assert excinfo.value.column == "t"
    assert excinfo.value.record_index == 0


@pytest.mark.parametrize("limit", [0, -5])
def test_context_bound_must_be_positive(limit: int) -> None:
    with pytest.raises(ValueError, match="context_chars"):
        ExtractionOptions(context_chars=limit)
