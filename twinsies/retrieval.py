from __future__ import annotations
"""
Retrieval module for company-name search.

Scores every index entry against the query, keeps one entry per
(name, side), and orders the survivors by score then name length.
"""

from typing import List, Sequence, Set, Tuple

from loguru import logger

from .config import MIN_QUERY_CHARS, RESULT_LIMIT
from .normalize import prepare_query
from .pipeline_types import IndexEntry, ScoredMatch
from .scoring import calculate_match_score


def _sort_key(match: ScoredMatch) -> Tuple[float, int]:
    # Higher score first; on ties the shorter name is the likelier target.
    return -match.score, len(match.entry.name)


def fuzzy_search(
    index: Sequence[IndexEntry],
    query: str,
    limit: int = RESULT_LIMIT,
) -> List[ScoredMatch]:
    """
    Rank index entries for a free-text query.

    Queries under MIN_QUERY_CHARS (after trimming) return nothing. The same
    company can sit in several pairs; only the first entry per (name, side)
    in index order is kept, even if a later duplicate would score higher.
    """
    query_lower, query_words = prepare_query(query)
    if len(query_lower) < MIN_QUERY_CHARS:
        return []

    results: List[ScoredMatch] = []
    seen: Set[Tuple[str, str]] = set()

    for entry in index:
        if entry.key in seen:
            continue

        score = calculate_match_score(entry.search_name, query_lower, query_words)
        if score > 0:
            seen.add(entry.key)
            results.append(ScoredMatch(entry=entry, score=score))

    results.sort(key=_sort_key)

    logger.debug(
        "fuzzy_search: query='{}' matched={} returned={}",
        query_lower, len(results), min(len(results), max(limit, 0)),
    )
    return results[:max(limit, 0)]
