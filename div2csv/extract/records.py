"""
Record extractor.

Turns a parsed document and a validated `Specification` into a
`TabularResult`.  The root locator selects the record fragments; every
visible column is then resolved inside each fragment by trying its
locators in order, the first one that matches wins.  A required column
without any match aborts the whole run unless the options ask for the
record to be skipped instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from lxml import etree

from ..errors import ExtractionFailed, MissingRequiredColumn, NoRecordsFound
from ..spec.schema import ColumnSpec, Specification
from .result import TabularResult
from .sanitize import sanitize, summarize

logger = logging.getLogger(__name__)

EMPTY_VALUE = "<empty>"
LINK_TAG = "a"
ON_MISSING_REQUIRED = ("abort", "skip")

Match = Union[etree._Element, str]


@dataclass
class ExtractionOptions:
    """Tunables for a single extraction run.

    Attributes:
        on_missing_required: `"abort"` fails the run on the first record
            missing a required column; `"skip"` drops that record and
            carries on.
        context_chars: Maximum length of the record text quoted in a
            `MissingRequiredColumn` error.
    """

    on_missing_required: str = "abort"
    context_chars: int = 80

    def __post_init__(self) -> None:
        if self.on_missing_required not in ON_MISSING_REQUIRED:
            raise ValueError(
                f"on_missing_required must be one of {ON_MISSING_REQUIRED}, "
                f"got {self.on_missing_required!r}"
            )
        if self.context_chars <= 0:
            raise ValueError(f"context_chars must be positive, got {self.context_chars}")


def extract_records(
    document: Union[etree._ElementTree, etree._Element],
    specification: Specification,
    options: Optional[ExtractionOptions] = None,
) -> TabularResult:
    """Extract one row per record fragment of `document`.

    Args:
        document: Parsed HTML tree (see `parse_document`).
        specification: Column definitions.  Validated if not yet done.
        options: Optional `ExtractionOptions`.

    Returns:
        A `TabularResult` whose rows follow document order.

    Raises:
        InvalidSpecification: if the specification is invalid.
        NoRecordsFound: if the root locator matches nothing, or every
            record was skipped.
        MissingRequiredColumn: if a required column has no match and
            records are not being skipped.
        ExtractionFailed: if a locator fails to evaluate.
    """
    options = options or ExtractionOptions()
    specification.validate()
    columns = specification.visible_columns
    table = TabularResult([c.name for c in columns])

    fragments = _select_fragments(document, specification.root)
    if not fragments:
        raise NoRecordsFound()
    logger.debug("Root locator matched %d fragments", len(fragments))

    for index, fragment in enumerate(fragments):
        try:
            row = _extract_row(fragment, index, columns, options)
        except MissingRequiredColumn as exc:
            if options.on_missing_required != "skip":
                raise
            logger.warning("Skipping record %d: %s", index, exc)
            table.skipped += 1
            continue
        table.add_row(row)

    if not table.rows:
        raise NoRecordsFound(f"All {len(fragments)} records were skipped.")
    return table


def _select_fragments(document, root: ColumnSpec) -> List[etree._Element]:
    fragments = _evaluate(root.compiled[0], document, column=root.name)
    for fragment in fragments:
        if not isinstance(fragment, etree._Element) or not isinstance(fragment.tag, str):
            raise ExtractionFailed(
                f"Root xpath {root.locators[0]!r} must select elements", column=root.name
            )
    return fragments


def _extract_row(
    fragment: etree._Element,
    index: int,
    columns: List[ColumnSpec],
    options: ExtractionOptions,
) -> Dict[str, str]:
    row: Dict[str, str] = {}
    for column in columns:
        match = _first_match(fragment, column, index)
        if match is None:
            if column.required:
                context = summarize(_text_of(fragment), options.context_chars)
                raise MissingRequiredColumn(column.name, index, context)
            row[column.name] = EMPTY_VALUE
            continue
        row[column.name] = _cell_value(match, column.strip)
    return row


def _first_match(fragment: etree._Element, column: ColumnSpec, index: int) -> Optional[Match]:
    for position, locator in enumerate(column.compiled):
        matches = _evaluate(locator, fragment, column=column.name, record_index=index)
        if matches:
            logger.debug("Record %d column '%s' matched xpath #%d", index, column.name, position)
            return matches[0]
    return None


def _evaluate(
    locator: etree.XPath,
    node,
    *,
    column: str,
    record_index: Optional[int] = None,
) -> List[Match]:
    try:
        result = locator(node)
    except etree.XPathError as exc:
        raise ExtractionFailed(
            f"XPath {locator.path!r} failed: {exc}", column=column, record_index=record_index
        ) from exc
    if not isinstance(result, list):
        raise ExtractionFailed(
            f"XPath {locator.path!r} must select nodes, not compute a value",
            column=column,
            record_index=record_index,
        )
    return result


def _cell_value(match: Match, strip: List[str]) -> str:
    if isinstance(match, str):
        # @attribute and text() results
        return sanitize(match, strip)
    if not isinstance(match.tag, str):
        # comments and processing instructions
        return sanitize(match.text or "", strip)
    text = sanitize(_text_of(match), strip)
    if match.tag.lower() == LINK_TAG:
        return _link_markup(match, text)
    return text


def _text_of(node: etree._Element) -> str:
    return "".join(node.xpath(".//text()"))


def _link_markup(link: etree._Element, text: str) -> str:
    """Serialize `link` with its attributes but only `text` as content."""
    clean = link.makeelement(link.tag, dict(link.attrib))
    clean.text = text
    return etree.tostring(clean, method="html", encoding="unicode", with_tail=False)
