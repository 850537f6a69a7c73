from __future__ import annotations

"""
Text normalisation helpers shared across catalog loading, indexing and
query handling.

Public helpers:

* basic_clean(text) -> str
    Light-weight clean used when loading catalog fields.

* to_search_key(name) -> str
    Lower-cased form of a display name that the scorer compares against.

* prepare_query(raw) -> (query_lower, query_words)
    Trimmed, lower-cased query and its whitespace-separated words.

* escape_html(text) -> str
    Markup escaping applied to every dynamic string before display.
"""

import html
import re
from typing import List, Tuple


def basic_clean(text: str | None) -> str:
    """Strip and collapse whitespace; None becomes an empty string."""
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return re.sub(r"\s+", " ", text).strip()


def to_search_key(name: str) -> str:
    return name.lower()


def split_words(text: str) -> List[str]:
    return text.split()


def prepare_query(raw: str | None) -> Tuple[str, List[str]]:
    """
    Trim and lower-case a raw query.

    Returns the lower-cased query plus its words. Length checks are left
    to the caller.
    """
    query_lower = (raw or "").strip().lower()
    return query_lower, split_words(query_lower)


def escape_html(text: str | None) -> str:
    """
    Escape `&`, `<` and `>`.

    Quotes are left alone: the output is meant for element content, not
    attribute values.
    """
    if text is None:
        return ""
    return html.escape(str(text), quote=False)
