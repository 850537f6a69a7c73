import json

import pytest

from twinsies.pipeline_types import PairRecord, SideRecord


def make_pair(nyc: str, london: str, category: str = "Finance", score: float = 0.5) -> PairRecord:
    return PairRecord(
        category=category,
        similarity_score=score,
        nyc=SideRecord(name=nyc, revenue=1_500_000_000, employees=2400, founding_year=1987),
        london=SideRecord(name=london, revenue=980_000_000, employees=1850, founding_year=1991),
    )


@pytest.fixture
def twin_catalog():
    """Single Finance pair used by most ranking scenarios."""
    return [make_pair("Meridian Capital", "Thames Capital", score=0.42)]


@pytest.fixture
def catalog_rows():
    return [
        {
            "category": "Finance",
            "similarity_score": 0.42,
            "nyc_company": "Meridian Capital",
            "nyc_revenue": 1500000000,
            "nyc_employees": 2400,
            "nyc_founding_year": 1987,
            "london_company": "Thames Capital",
            "london_revenue": 980000000,
            "london_employees": 1850,
            "london_founding_year": 1991,
        },
        {
            "category": "Software",
            "similarity_score": 0.65,
            "nyc_company": "Flatiron Analytics",
            "nyc_revenue": 72000000,
            "nyc_employees": 310,
            "nyc_founding_year": 2013,
            "london_company": "Shoreditch Data Labs",
            "london_revenue": 64000000,
            "london_employees": 280,
            "london_founding_year": 2014,
        },
    ]


@pytest.fixture
def catalog_json_path(tmp_path, catalog_rows):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps(catalog_rows))
    return path
