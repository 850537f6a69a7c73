import math

import pandas as pd
import pytest

from twinsies.catalog_build import (
    CANONICAL_COLUMNS,
    list_categories,
    load_catalog,
    load_raw_catalog,
    normalize_catalog_df,
    pairs_from_df,
)
from twinsies.config import DEFAULT_CATALOG_PATH


def test_normalize_catalog_accepts_column_variants():
    raw = pd.DataFrame(
        {
            "Category": ["  Finance "],
            "Similarity Score": [0.42],
            "NYC Company": ["Meridian   Capital"],
            "NYC Revenue": [1.5e9],
            "NYC Employees": [2400.0],
            "NYC Founding Year": [1987],
            "London Company": ["Thames Capital"],
            "London Revenue": [9.8e8],
            "London Employees": [1850],
            "London Founding Year": [1991],
        }
    )

    df = normalize_catalog_df(raw)

    assert list(df.columns) == CANONICAL_COLUMNS
    row = df.iloc[0]
    assert row["category"] == "Finance"
    assert row["nyc_company"] == "Meridian Capital"
    assert row["nyc_employees"] == 2400


def test_normalize_catalog_drops_invalid_rows():
    raw = pd.DataFrame(
        {
            "category": ["Finance", "Finance", "Finance", "Finance", "Retail"],
            "similarity_score": [0.5, None, -1.0, math.inf, 2.0],
            "nyc_company": ["Keep Me", "A", "B", "C", None],
            "london_company": ["Kept Too", "A2", "B2", "C2", "Orphan"],
        }
    )

    df = normalize_catalog_df(raw)

    assert df["nyc_company"].tolist() == ["Keep Me"]
    # missing numeric columns are filled with zeros
    assert df.loc[0, "nyc_revenue"] == 0
    assert df.loc[0, "london_founding_year"] == 0


def test_normalize_catalog_requires_name_columns():
    raw = pd.DataFrame({"category": ["Finance"], "similarity_score": [0.1], "nyc_company": ["A"]})
    with pytest.raises(KeyError):
        normalize_catalog_df(raw)


def test_normalize_empty_frame():
    df = normalize_catalog_df(pd.DataFrame())
    assert df.empty
    assert pairs_from_df(df) == []


def test_pairs_from_df_preserves_order_and_types(catalog_rows):
    pairs = pairs_from_df(normalize_catalog_df(pd.DataFrame(catalog_rows)))

    assert [p.nyc.name for p in pairs] == ["Meridian Capital", "Flatiron Analytics"]
    first = pairs[0]
    assert first.london.name == "Thames Capital"
    assert first.similarity_score == pytest.approx(0.42)
    assert isinstance(first.nyc.employees, int)
    assert isinstance(first.london.revenue, float)
    assert first.london.founding_year == 1991


def test_load_catalog_from_json(catalog_json_path):
    pairs = load_catalog(catalog_json_path)
    assert len(pairs) == 2
    assert pairs[1].category == "Software"


def test_load_catalog_from_csv(tmp_path, catalog_rows):
    path = tmp_path / "pairs.csv"
    pd.DataFrame(catalog_rows).to_csv(path, index=False)

    pairs = load_catalog(path)
    assert [p.london.name for p in pairs] == ["Thames Capital", "Shoreditch Data Labs"]


def test_load_raw_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_raw_catalog(tmp_path / "nope.json")


def test_load_raw_catalog_unsupported_format(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("hello")
    with pytest.raises(ValueError):
        load_raw_catalog(path)


def test_list_categories_sorted_unique(catalog_json_path):
    pairs = load_catalog(catalog_json_path)
    assert list_categories(pairs + pairs) == ["Finance", "Software"]


def test_bundled_catalog_loads():
    pairs = load_catalog(DEFAULT_CATALOG_PATH)
    assert len(pairs) == 7
    assert pairs[0].nyc.name == "Meridian Capital"
    assert all(p.similarity_score >= 0 for p in pairs)


def test_load_catalog_from_csv_keeps_na_like_names(tmp_path, catalog_rows):
    rows = [dict(catalog_rows[0], london_company="NA"), dict(catalog_rows[1], nyc_company="None")]
    path = tmp_path / "pairs.csv"
    pd.DataFrame(rows).to_csv(path, index=False)

    pairs = load_catalog(path)
    assert [p.london.name for p in pairs] == ["NA", "Shoreditch Data Labs"]
    assert pairs[1].nyc.name == "None"


def test_load_catalog_from_csv_drops_blank_names(tmp_path, catalog_rows):
    rows = [dict(catalog_rows[0], london_company=""), catalog_rows[1]]
    path = tmp_path / "pairs.csv"
    pd.DataFrame(rows).to_csv(path, index=False)

    assert [p.london.name for p in load_catalog(path)] == ["Shoreditch Data Labs"]
