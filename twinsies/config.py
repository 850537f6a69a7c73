from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "business_pairs.json"
CATALOG_PATH = Path(os.getenv("TWINSIES_CATALOG", str(DEFAULT_CATALOG_PATH)))


# ---------------------------
# Sides
# ---------------------------

SIDE_NYC = "nyc"
SIDE_LONDON = "london"
SIDES: List[str] = [SIDE_NYC, SIDE_LONDON]

CITY_LABELS: Dict[str, str] = {
    SIDE_NYC: "New York City",
    SIDE_LONDON: "London",
}

CITY_FLAGS: Dict[str, str] = {
    SIDE_NYC: "\U0001F1FA\U0001F1F8",
    SIDE_LONDON: "\U0001F1EC\U0001F1E7",
}


# ---------------------------
# Matching & ranking settings
# ---------------------------

DEFAULT_RESULT_LIMIT = 10
RESULT_LIMIT = int(os.getenv("TWINSIES_RESULT_LIMIT", str(DEFAULT_RESULT_LIMIT)))

MIN_QUERY_CHARS = 2       # shorter queries match nearly everything
MIN_WORD_CHARS = 2        # words shorter than this are ignored by word scoring

EXACT_MATCH_POINTS = 100
PREFIX_MATCH_POINTS = 50
SUBSTRING_MATCH_POINTS = 30

WORD_MATCH_POINTS = 10
WORD_AT_START_BONUS = 5
FUZZY_WORD_POINTS = 5     # multiplied by the coverage ratio
FUZZY_MATCH_THRESHOLD = 0.6

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"


# ---------------------------
# Browse settings
# ---------------------------

DEFAULT_MAX_SIMILARITY = 3.0

DATA_REMINDER = (
    "The data only includes companies registered in London or NYC as of 2023 "
    "with at least 10 employees."
)


# ---------------------------
# Pydantic view models shared by the presentation layer
# ---------------------------

class SuggestionItem(BaseModel):
    """
    One row of the suggestion list shown while the user types.
    `name_html` and `category` are already escaped for markup.
    """

    name: str
    name_html: str
    side: str
    city: str
    flag: str
    category: str
    score: float = Field(gt=0)
    similarity: str
    pair_index: int = Field(ge=0)


class SuggestResponse(BaseModel):
    """
    Ranked suggestions for a single query.
    """

    query: str
    suggestions: List[SuggestionItem]
    reminder: str = DATA_REMINDER


class CompanyCard(BaseModel):
    """
    One side of a comparison.
    """

    side: str
    city: str
    flag: str
    company: str
    revenue: str
    employees: str
    founded: int


class ComparisonView(BaseModel):
    """
    Side-by-side view of a pair, selected side first.
    """

    category: str
    similarity: str
    first: CompanyCard
    second: CompanyCard


class CategorySummary(BaseModel):
    """
    Category name with the number of pairs it holds.
    """

    name: str
    count: int = Field(ge=0)


class BusinessRow(BaseModel):
    """
    One pair in a category listing; names are escaped for markup.
    """

    nyc_company: str
    london_company: str
    similarity: str
