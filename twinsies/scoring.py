from __future__ import annotations

"""
Match scoring for company-name search.

A name is scored against a query by the first tier that applies:

    exact name        -> EXACT_MATCH_POINTS
    name prefix       -> PREFIX_MATCH_POINTS
    substring         -> SUBSTRING_MATCH_POINTS
    per-word fallback -> sum of word points, or 0 unless every word matched

The per-word fallback accepts misspelt words through `fuzzy_char_match`.
"""

from typing import Sequence

from .config import (
    EXACT_MATCH_POINTS,
    FUZZY_MATCH_THRESHOLD,
    FUZZY_WORD_POINTS,
    MIN_WORD_CHARS,
    PREFIX_MATCH_POINTS,
    SUBSTRING_MATCH_POINTS,
    WORD_AT_START_BONUS,
    WORD_MATCH_POINTS,
)


def fuzzy_char_match(target: str, pattern: str) -> float:
    """
    Ordered-subsequence coverage of `pattern` inside `target`.

    Each pattern character is looked up after the previous hit; misses are
    skipped without moving the cursor. Returns hits / len(pattern), in [0, 1].
    """
    if not pattern or len(pattern) > len(target):
        return 0.0

    matches = 0
    last_index = -1
    for char in pattern:
        index = target.find(char, last_index + 1)
        if index > -1:
            matches += 1
            last_index = index

    return matches / len(pattern)


def _score_words(search_name: str, query_words: Sequence[str]) -> float:
    word_score = 0.0
    for word in query_words:
        if len(word) < MIN_WORD_CHARS:
            continue

        if word in search_name:
            word_score += WORD_MATCH_POINTS
            if search_name.startswith(word):
                word_score += WORD_AT_START_BONUS
            continue

        coverage = fuzzy_char_match(search_name, word)
        if coverage > FUZZY_MATCH_THRESHOLD:
            word_score += coverage * FUZZY_WORD_POINTS
        else:
            return 0.0

    return word_score if word_score > 0 else 0.0


def calculate_match_score(
    search_name: str,
    query_lower: str,
    query_words: Sequence[str],
) -> float:
    """
    Score a lower-cased name against a lower-cased query. 0 means no match.
    """
    if search_name == query_lower:
        return float(EXACT_MATCH_POINTS)
    if search_name.startswith(query_lower):
        return float(PREFIX_MATCH_POINTS)
    if query_lower in search_name:
        return float(SUBSTRING_MATCH_POINTS)
    return _score_words(search_name, query_words)
