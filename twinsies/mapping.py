from __future__ import annotations
"""
Mapping utilities to convert ranked matches and pairs into view models.

Centralises the conversion from engine output (ScoredMatch / PairRecord)
into the Pydantic schemas (SuggestionItem / SuggestResponse /
ComparisonView) so every front end escapes and formats the same way.
"""

from typing import Dict, List, Sequence

from loguru import logger

from .config import (
    CITY_FLAGS,
    CITY_LABELS,
    SIDE_LONDON,
    SIDE_NYC,
    BusinessRow,
    CategorySummary,
    CompanyCard,
    ComparisonView,
    SuggestionItem,
    SuggestResponse,
)
from .formatting import format_currency, format_number, format_similarity
from .highlight import highlight_match
from .normalize import escape_html
from .pipeline_types import PairRecord, ScoredMatch


def other_side(side: str) -> str:
    if side == SIDE_NYC:
        return SIDE_LONDON
    if side == SIDE_LONDON:
        return SIDE_NYC
    raise KeyError(f"Unknown side: {side!r}")


def to_suggestion(match: ScoredMatch, query: str) -> SuggestionItem:
    entry = match.entry
    return SuggestionItem(
        name=entry.name,
        name_html=highlight_match(entry.name, query),
        side=entry.side,
        city=CITY_LABELS[entry.side],
        flag=CITY_FLAGS[entry.side],
        category=escape_html(entry.category),
        score=match.score,
        similarity=format_similarity(entry.pair.similarity_score),
        pair_index=entry.pair_index,
    )


def map_matches_to_response(
    matches: Sequence[ScoredMatch],
    query: str,
) -> SuggestResponse:
    """
    Convert a ranked match list into a SuggestResponse, keeping rank order.
    """
    suggestions: List[SuggestionItem] = [to_suggestion(m, query) for m in matches]
    logger.debug("Mapped {} matches into suggestions", len(suggestions))
    return SuggestResponse(query=query, suggestions=suggestions)


def _company_card(pair: PairRecord, side: str) -> CompanyCard:
    record = pair.side(side)
    return CompanyCard(
        side=side,
        city=CITY_LABELS[side],
        flag=CITY_FLAGS[side],
        company=escape_html(record.name),
        revenue=format_currency(record.revenue),
        employees=format_number(record.employees),
        founded=record.founding_year,
    )


def build_comparison(pair: PairRecord, selected_side: str = SIDE_NYC) -> ComparisonView:
    """
    Side-by-side view of `pair` with the selected company's card first.
    """
    return ComparisonView(
        category=escape_html(pair.category),
        similarity=format_similarity(pair.similarity_score),
        first=_company_card(pair, selected_side),
        second=_company_card(pair, other_side(selected_side)),
    )


def summarize_categories(categories: Sequence[str], counts: Dict[str, int]) -> List[CategorySummary]:
    return [CategorySummary(name=escape_html(c), count=counts.get(c, 0)) for c in categories]


def to_business_row(pair: PairRecord) -> BusinessRow:
    return BusinessRow(
        nyc_company=escape_html(pair.nyc.name),
        london_company=escape_html(pair.london.name),
        similarity=format_similarity(pair.similarity_score),
    )
