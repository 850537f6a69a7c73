from __future__ import annotations

"""
Search index over the pair catalog.

Every pair contributes two entries, one per side, so a query can hit
either company. The index is built once from the loaded catalog and then
passed around as a plain, read-only list; nothing here keeps module state.
"""

from typing import List, Sequence

from loguru import logger

from .normalize import to_search_key
from .pipeline_types import IndexEntry, PairRecord


def build_search_index(catalog: Sequence[PairRecord]) -> List[IndexEntry]:
    """
    Flatten the catalog into searchable entries.

    Order is nyc of pair 0, london of pair 0, nyc of pair 1, ... so that
    ranking ties and duplicate handling are reproducible.
    """
    index: List[IndexEntry] = []
    for pair_index, pair in enumerate(catalog):
        for side, record in pair.sides():
            index.append(
                IndexEntry(
                    name=record.name,
                    search_name=to_search_key(record.name),
                    side=side,
                    category=pair.category,
                    pair_index=pair_index,
                    pair=pair,
                )
            )

    logger.info("Built search index with {} entries from {} pairs", len(index), len(catalog))
    return index
