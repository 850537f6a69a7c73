from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd
from loguru import logger

from .config import CATALOG_PATH
from .normalize import basic_clean
from .pipeline_types import PairRecord, SideRecord


# ---------------------------
# Column detection / standardization
# ---------------------------

# Exports of the pair list have used a few naming styles over time.
COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "category": ["category", "Category", "industry", "Industry", "sector"],
    "similarity_score": [
        "similarity_score",
        "Similarity Score",
        "similarity",
        "Similarity",
        "distance",
    ],
    "nyc_company": ["nyc_company", "NYC Company", "nyc_name", "NYC Name"],
    "nyc_revenue": ["nyc_revenue", "NYC Revenue"],
    "nyc_employees": ["nyc_employees", "NYC Employees"],
    "nyc_founding_year": ["nyc_founding_year", "NYC Founding Year", "nyc_founded"],
    "london_company": ["london_company", "London Company", "london_name", "London Name"],
    "london_revenue": ["london_revenue", "London Revenue"],
    "london_employees": ["london_employees", "London Employees"],
    "london_founding_year": [
        "london_founding_year",
        "London Founding Year",
        "london_founded",
    ],
}

CANONICAL_COLUMNS: List[str] = list(COLUMN_CANDIDATES)

_NAME_COLUMNS = ["nyc_company", "london_company"]
_FLOAT_COLUMNS = ["nyc_revenue", "london_revenue"]
_INT_COLUMNS = [
    "nyc_employees",
    "london_employees",
    "nyc_founding_year",
    "london_founding_year",
]


def _standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename columns from the raw export to the canonical schema.
    """
    col_map: Dict[str, str] = {}
    lower_to_original = {str(c).lower(): c for c in df.columns}

    for canon, candidates in COLUMN_CANDIDATES.items():
        for candidate in candidates:
            # Try exact, then case-insensitive
            if candidate in df.columns:
                col_map[candidate] = canon
                break
            cand_lower = candidate.lower()
            if cand_lower in lower_to_original:
                col_map[lower_to_original[cand_lower]] = canon
                break

    logger.info("Standardizing columns with map: {}", col_map)
    df_std = df.rename(columns=col_map)

    missing = [c for c in ["category", "similarity_score"] + _NAME_COLUMNS if c not in df_std.columns]
    if missing:
        raise KeyError(f"Catalog is missing required columns: {missing}")

    optional_missing = [c for c in CANONICAL_COLUMNS if c not in df_std.columns]
    if optional_missing:
        logger.warning("Catalog has no columns {}; filling with 0", optional_missing)
        for col in optional_missing:
            df_std[col] = 0

    return df_std


# ---------------------------
# Field parsing helpers
# ---------------------------

def _clean_text(value) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return basic_clean(value)


def _coerce_float(value, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(out) else out


def _coerce_int(value, default: int = 0) -> int:
    out = _coerce_float(value, float(default))
    if math.isinf(out):
        return default
    return int(out)


def _valid_similarity(value) -> bool:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(score) and score >= 0


# ---------------------------
# Catalog normalization
# ---------------------------

def normalize_catalog_df(df_raw: pd.DataFrame) -> pd.DataFrame:
    """
    Turn a raw pair export into the canonical schema:

    - category (str)
    - similarity_score (float, finite, >= 0)
    - nyc_company / london_company (str, non-empty)
    - nyc_revenue / london_revenue (float)
    - nyc_employees / london_employees (int)
    - nyc_founding_year / london_founding_year (int)

    Rows that cannot form a valid pair are dropped and logged. Row order is
    kept, since a pair's identity is its position.
    """
    logger.info("Normalizing catalog dataframe with {} raw rows", len(df_raw))

    if df_raw.empty:
        return pd.DataFrame(columns=CANONICAL_COLUMNS)

    df = _standardize_columns(df_raw.copy())

    df["category"] = df["category"].apply(_clean_text)
    for col in _NAME_COLUMNS:
        df[col] = df[col].apply(_clean_text)

    empty_names = (df["nyc_company"] == "") | (df["london_company"] == "")
    if empty_names.any():
        logger.warning("Dropping {} rows with an empty company name", int(empty_names.sum()))
        df = df[~empty_names].copy()

    bad_scores = ~df["similarity_score"].apply(_valid_similarity).astype(bool)
    if bad_scores.any():
        logger.warning(
            "Dropping {} rows with a missing, non-finite or negative similarity score",
            int(bad_scores.sum()),
        )
        df = df[~bad_scores].copy()

    df["similarity_score"] = df["similarity_score"].astype(float)
    for col in _FLOAT_COLUMNS:
        df[col] = df[col].apply(_coerce_float)
    for col in _INT_COLUMNS:
        df[col] = df[col].apply(_coerce_int)

    df_out = df[CANONICAL_COLUMNS].reset_index(drop=True)
    logger.info("Catalog normalization complete. Final rows: {}", len(df_out))
    return df_out


def pairs_from_df(df: pd.DataFrame) -> List[PairRecord]:
    """
    Build PairRecords from a normalized catalog frame, in row order.
    """
    pairs: List[PairRecord] = []
    for row in df.to_dict(orient="records"):
        pairs.append(
            PairRecord(
                category=row["category"],
                similarity_score=float(row["similarity_score"]),
                nyc=SideRecord(
                    name=row["nyc_company"],
                    revenue=float(row["nyc_revenue"]),
                    employees=int(row["nyc_employees"]),
                    founding_year=int(row["nyc_founding_year"]),
                ),
                london=SideRecord(
                    name=row["london_company"],
                    revenue=float(row["london_revenue"]),
                    employees=int(row["london_employees"]),
                    founding_year=int(row["london_founding_year"]),
                ),
            )
        )
    return pairs


def list_categories(catalog: Iterable[PairRecord]) -> List[str]:
    """Sorted unique categories present in the catalog."""
    return sorted({pair.category for pair in catalog})


# ---------------------------
# IO helpers
# ---------------------------

def load_raw_catalog(path: Optional[Path] = None) -> pd.DataFrame:
    """
    Load the raw pair export from a JSON array of records or a CSV file.
    """
    path = Path(path) if path is not None else CATALOG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    ext = path.suffix.lower()
    logger.info("Loading raw catalog from {}", path)
    if ext == ".json":
        df = pd.read_json(path, orient="records", dtype=False)
    elif ext == ".csv":
        # company names such as "NA" or "None" are real names, not missing values
        df = pd.read_csv(path, encoding="utf-8", keep_default_na=False, na_values=[""])
    else:
        raise ValueError(f"Unsupported catalog format '{ext}' (expected .json or .csv)")

    logger.info("Loaded {} rows from raw catalog", len(df))
    return df


def load_catalog(path: Optional[Path] = None) -> List[PairRecord]:
    """
    End-to-end: load raw export -> normalize -> PairRecords.
    """
    df = normalize_catalog_df(load_raw_catalog(path))
    return pairs_from_df(df)


# ---------------------------
# CLI entrypoint
# ---------------------------

if __name__ == "__main__":
    # python -m twinsies.catalog_build
    catalog = load_catalog()
    logger.info("{} pairs across {} categories", len(catalog), len(list_categories(catalog)))
