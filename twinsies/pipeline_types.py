"""Typed containers shared across pipeline modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .config import SIDE_LONDON, SIDE_NYC


@dataclass(frozen=True)
class SideRecord:
    """One company of a pair."""

    name: str
    revenue: float
    employees: int
    founding_year: int


@dataclass(frozen=True)
class PairRecord:
    """A NYC company and its London counterpart."""

    category: str
    similarity_score: float  # lower = more similar
    nyc: SideRecord
    london: SideRecord

    def side(self, tag: str) -> SideRecord:
        if tag == SIDE_NYC:
            return self.nyc
        if tag == SIDE_LONDON:
            return self.london
        raise KeyError(f"Unknown side: {tag!r}")

    def sides(self) -> Iterator[Tuple[str, SideRecord]]:
        yield SIDE_NYC, self.nyc
        yield SIDE_LONDON, self.london


@dataclass(frozen=True)
class IndexEntry:
    """One searchable side of one pair."""

    name: str
    search_name: str
    side: str
    category: str
    pair_index: int
    pair: PairRecord

    @property
    def key(self) -> Tuple[str, str]:
        return self.name, self.side


@dataclass(frozen=True)
class ScoredMatch:
    """Index entry with its score for a single query."""

    entry: IndexEntry
    score: float

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def side(self) -> str:
        return self.entry.side

    @property
    def pair(self) -> PairRecord:
        return self.entry.pair


# (start, end) offsets into a display string, or None when nothing matched
HighlightSpan = Optional[Tuple[int, int]]
