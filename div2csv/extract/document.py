"""
HTML document loading.

Reads the input document from disk and parses it into an lxml tree.
The caller may force an encoding; otherwise bs4's `UnicodeDammit`
sniffs it from the bytes (BOM, meta charset, then heuristics).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import lxml.html
from bs4 import UnicodeDammit
from lxml import etree

from ..errors import ExtractionFailed

logger = logging.getLogger(__name__)

# lxml refuses str input that still carries an encoding declaration.
_XML_DECLARATION_RE = re.compile(r"\A\ufeff?\s*<\?xml[^>]*\?>")


def parse_document(html: str) -> etree._ElementTree:
    """Parse HTML text into a document tree.

    Raises:
        ExtractionFailed: if the text is empty or cannot be parsed.
    """
    html = _XML_DECLARATION_RE.sub("", html, count=1)
    try:
        root = lxml.html.document_fromstring(html)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as exc:
        raise ExtractionFailed(f"Could not parse HTML: {exc}") from exc
    return root.getroottree()


def load_document(path: str | Path, encoding: Optional[str] = None) -> etree._ElementTree:
    """Read and parse the HTML file at `path`.

    Args:
        path: Location of the HTML document.
        encoding: Optional codec name.  When omitted the encoding is
            detected from the document itself.

    Raises:
        ExtractionFailed: if the file is missing, unreadable or cannot
            be decoded or parsed.
    """
    html_path = Path(path)
    if not html_path.is_file():
        raise ExtractionFailed(f"HTML file {html_path} does not exist.")
    try:
        data = html_path.read_bytes()
    except OSError as exc:
        raise ExtractionFailed(f"Could not read HTML file {html_path}: {exc}") from exc

    if encoding:
        try:
            text = data.decode(encoding)
        except (LookupError, UnicodeDecodeError) as exc:
            raise ExtractionFailed(f"Could not decode {html_path} as {encoding}: {exc}") from exc
    else:
        dammit = UnicodeDammit(data, is_html=True)
        if dammit.unicode_markup is None:
            raise ExtractionFailed(f"Could not detect the encoding of {html_path}")
        text = dammit.unicode_markup
        logger.debug("Decoded %s as %s", html_path, dammit.original_encoding)
    return parse_document(text)
