from __future__ import annotations

import re
from typing import Optional, Tuple

from .config import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN, MIN_WORD_CHARS
from .normalize import escape_html, split_words
from .pipeline_types import HighlightSpan


def _find_ci(text: str, needle: str) -> Optional[Tuple[int, int]]:
    match = re.search(re.escape(needle), text, flags=re.IGNORECASE)
    return match.span() if match else None


def find_highlight_span(text: str, query: str) -> HighlightSpan:
    """
    Locate the part of `text` to mark for `query`, case-insensitively.

    The whole query wins; failing that, the first query word of at least
    MIN_WORD_CHARS that occurs in `text`. Returns None when nothing matches.
    """
    if not text or not query:
        return None

    span = _find_ci(text, query)
    if span is not None:
        return span

    for word in split_words(query):
        if len(word) < MIN_WORD_CHARS:
            continue
        span = _find_ci(text, word)
        if span is not None:
            return span
    return None


def highlight_match(text: str, query: str) -> str:
    """
    Escaped `text` with the matched span wrapped in a <mark> tag.

    Each segment is escaped on its own, so the marker is the only markup
    in the result.
    """
    span = find_highlight_span(text, query)
    if span is None:
        return escape_html(text)

    start, end = span
    return (
        escape_html(text[:start])
        + HIGHLIGHT_OPEN
        + escape_html(text[start:end])
        + HIGHLIGHT_CLOSE
        + escape_html(text[end:])
    )
