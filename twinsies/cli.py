# twinsies/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from . import config
from .browse import count_categories, filter_categories, pairs_in_category
from .catalog_build import list_categories, load_catalog
from .config import ComparisonView
from .mapping import (
    build_comparison,
    map_matches_to_response,
    summarize_categories,
    to_business_row,
)
from .normalize import escape_html
from .pipeline_types import PairRecord
from .retrieval import fuzzy_search
from .search_index import build_search_index


# ---------- output helpers ----------

def _print_comparison(view: ComparisonView) -> None:
    print(f"Business Doppelganger Match  [{view.category}]  similarity {view.similarity}")
    for card in (view.first, view.second):
        print(f"  {card.flag} {card.city}: {card.company}")
        print(f"      Revenue    {card.revenue}")
        print(f"      Employees  {card.employees}")
        print(f"      Founded    {card.founded}")


def _print_pairs(pairs: Sequence[PairRecord]) -> None:
    for row in map(to_business_row, pairs):
        print(f"  {row.nyc_company}  <->  {row.london_company}  ({row.similarity})")


# ---------- commands ----------

def _cmd_search(args: argparse.Namespace, catalog: List[PairRecord]) -> int:
    index = build_search_index(catalog)
    matches = fuzzy_search(index, args.query, limit=args.limit)
    response = map_matches_to_response(matches, args.query.strip())

    if args.json:
        print(response.model_dump_json(indent=2))
        return 0

    if not response.suggestions:
        print(f"No companies found matching '{escape_html(args.query)}'")
        return 0
    for item in response.suggestions:
        print(f"{item.flag} {item.name_html}  [{item.category}]  {item.similarity}")
    print(response.reminder)
    return 0


def _cmd_compare(args: argparse.Namespace, catalog: List[PairRecord]) -> int:
    index = build_search_index(catalog)
    matches = fuzzy_search(index, args.name, limit=1)
    if not matches:
        print(f"No companies found matching '{escape_html(args.name)}'", file=sys.stderr)
        return 1

    best = matches[0]
    _print_comparison(build_comparison(best.pair, args.side or best.side))
    return 0


def _cmd_browse(args: argparse.Namespace, catalog: List[PairRecord]) -> int:
    if args.category:
        pairs = pairs_in_category(catalog, args.category, args.max_similarity)
        if not pairs:
            print(f"No businesses found with similarity <= {args.max_similarity}")
            return 0
        print(escape_html(args.category))
        _print_pairs(pairs)
        return 0

    categories = filter_categories(list_categories(catalog), args.filter)
    if not categories:
        print(f"No categories found matching '{escape_html(args.filter)}'")
        return 0
    for summary in summarize_categories(categories, count_categories(catalog)):
        print(f"{summary.name:<40} {summary.count:>5}")
    return 0


# ---------- CLI ----------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="twinsies",
        description="Find the London twin of a New York company, and vice versa.",
    )
    ap.add_argument("--catalog", type=Path, default=config.CATALOG_PATH,
                    help="Path to the pair catalog (.json or .csv)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = ap.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Rank companies for a partial name")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=config.RESULT_LIMIT)
    search.add_argument("--json", action="store_true", help="Print the response as JSON")
    search.set_defaults(func=_cmd_search)

    compare = sub.add_parser("compare", help="Show the pair of the best match")
    compare.add_argument("name")
    compare.add_argument("--side", choices=config.SIDES, default=None,
                         help="Card to show first (defaults to the matched side)")
    compare.set_defaults(func=_cmd_compare)

    browse = sub.add_parser("browse", help="List categories or the pairs in one")
    browse.add_argument("--category", default=None)
    browse.add_argument("--filter", default="", help="Substring filter on category names")
    browse.add_argument("--max-similarity", type=float, default=config.DEFAULT_MAX_SIMILARITY)
    browse.set_defaults(func=_cmd_browse)

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        catalog = load_catalog(args.catalog)
    except (FileNotFoundError, ValueError, KeyError) as e:
        print(f"Error: could not load catalog: {e}", file=sys.stderr)
        return 2

    return args.func(args, catalog)


if __name__ == "__main__":
    sys.exit(main())
