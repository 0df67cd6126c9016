"""
Content sanitizer.

Cleans text pulled out of a matched node before it is written to a
cell: markup and non-breaking spaces are removed, then the column's
strip terms (case-insensitive), then every line break, and finally the
result is trimmed.
"""

from __future__ import annotations

import re
from typing import Iterable

# Tags and the literal entity.  lxml decodes entities while parsing, so
# the decoded U+00A0 character is dropped as well.
_MARKUP_RE = re.compile(r"<[^>]+>|&nbsp;|\u00a0")
_LINE_ENDINGS_RE = re.compile(r"\r\n|[\r\n\f\u0085\u2028\u2029]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize(raw_text: str, strip: Iterable[str] = ()) -> str:
    """Return `raw_text` with markup, strip terms and line breaks removed."""
    text = _MARKUP_RE.sub("", raw_text)
    for term in strip:
        if term:
            text = re.sub(re.escape(term), "", text, flags=re.IGNORECASE)
    text = _LINE_ENDINGS_RE.sub("", text)
    return text.strip()


def summarize(text: str, limit: int = 80) -> str:
    """Collapse whitespace and cut `text` to at most `limit` characters."""
    text = _WHITESPACE_RE.sub(" ", text).strip()
    if limit <= 0 or len(text) <= limit:
        return text
    if limit <= 3:
        return text[:limit]
    return text[: limit - 3].rstrip() + "..."
