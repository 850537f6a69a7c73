"""Category browsing over the pair catalog."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Sequence

from loguru import logger

from .config import DEFAULT_MAX_SIMILARITY
from .pipeline_types import PairRecord


def count_categories(catalog: Iterable[PairRecord]) -> Dict[str, int]:
    return dict(Counter(pair.category for pair in catalog))


def filter_categories(categories: Sequence[str], text: str = "") -> List[str]:
    """Case-insensitive substring filter; blank text keeps everything."""
    needle = (text or "").strip().lower()
    return [c for c in categories if needle in c.lower()]


def pairs_in_category(
    catalog: Sequence[PairRecord],
    category: str,
    max_similarity: float = DEFAULT_MAX_SIMILARITY,
) -> List[PairRecord]:
    """
    Pairs of exactly `category` with a similarity score at or under
    `max_similarity`, most similar (lowest score) first.
    """
    selected = [
        pair
        for pair in catalog
        if pair.category == category and pair.similarity_score <= max_similarity
    ]
    selected.sort(key=lambda pair: pair.similarity_score)
    logger.debug(
        "pairs_in_category: category='{}' max_similarity={} -> {}",
        category, max_similarity, len(selected),
    )
    return selected
