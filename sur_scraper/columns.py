# sur_scraper/columns.py
"""
Table classification and column resolution for the SUR page.

The page has no schema guarantee and its column order drifts, so tables and
columns are recognised by substring matches on header text. The keyword
tables below are data: add a wording variant here, not in the extractor.
"""
from __future__ import annotations
from functools import reduce
from typing import Dict, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from .parsing import find_tables, header_texts

ColumnMapping = Dict[str, int]

# A table is relevant when any header contains one of these
RELEVANCE_KEYWORDS: Tuple[str, ...] = ("medicinal ingredient", "drug")

# (role, keywords) in priority order; a header feeds at most one role
COLUMN_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("ingredient", ("medicinal ingredient", "drug name")),
    ("date",       ("year", "month", "accept")),
    ("area",       ("therapeutic", "area")),
    ("company",    ("company", "sponsor")),
    ("class",      ("class", "submission")),
)

DEFAULT_COLUMNS: Dict[str, int] = {
    "ingredient": 0,
    "date": 1,
    "area": 2,
    "company": 3,
    "class": 4,
}

def is_submission_table(headers: Sequence[str]) -> bool:
    return any(k in h.lower() for h in headers for k in RELEVANCE_KEYWORDS)

def role_for_header(text: str) -> Optional[str]:
    text = text.lower()
    for role, keywords in COLUMN_RULES:
        if any(k in text for k in keywords):
            return role
    return None

def resolve_columns(headers: Sequence[str]) -> ColumnMapping:
    """
    Fold the rules over the headers left to right, starting from the
    default positions. A later header overrides an earlier one for the
    same role. Always returns a new dict.
    """
    def step(mapping: ColumnMapping, item: Tuple[int, str]) -> ColumnMapping:
        idx, text = item
        role = role_for_header(text)
        return {**mapping, role: idx} if role else mapping

    return reduce(step, enumerate(headers), dict(DEFAULT_COLUMNS))

def classify_tables(doc: BeautifulSoup) -> List[Tuple[Tag, ColumnMapping]]:
    matched: List[Tuple[Tag, ColumnMapping]] = []
    for table in find_tables(doc):
        headers = header_texts(table)
        if not is_submission_table(headers):
            continue
        matched.append((table, resolve_columns(headers)))
    return matched
