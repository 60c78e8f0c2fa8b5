# sur_scraper/search.py
from __future__ import annotations
from typing import Iterable, List, Sequence, TypeVar

from .sur_scraper import NOT_AVAILABLE

R = TypeVar("R")

SEARCH_FIELDS  = ("medicinal_ingredient", "company_sponsor_name", "company_name", "therapeutic_area")
COMPANY_FIELDS = ("company_sponsor_name", "company_name")
AREA_FIELDS    = ("therapeutic_area",)

def _field_values(rec, fields: Iterable[str]) -> List[str]:
    return [v for v in (getattr(rec, f, None) for f in fields) if v]

def filter_records(records: Sequence[R], query: str, fields: Sequence[str] = SEARCH_FIELDS) -> List[R]:
    """Case-insensitive substring match of `query` on `fields` (ingredient, company, area by default)."""
    q = (query or "").strip().lower()
    if not q:
        return list(records)
    out: List[R] = []
    for rec in records:
        if any(q in v.lower() for v in _field_values(rec, fields)):
            out.append(rec)
    return out

def filter_by_company(records: Sequence[R], company: str) -> List[R]:
    return filter_records(records, company, COMPANY_FIELDS)

def filter_by_therapeutic_area(records: Sequence[R], area: str) -> List[R]:
    return filter_records(records, area, AREA_FIELDS)

# ----------------------------------
# Facets for dashboard pickers
# ----------------------------------
def therapeutic_areas(records: Iterable) -> List[str]:
    """Sorted distinct therapeutic areas; a blank area is listed as ""."""
    return sorted({getattr(rec, "therapeutic_area", "") for rec in records})

def companies(records: Iterable) -> List[str]:
    """Sorted distinct company names, without the "Not available" sentinel."""
    names = set()
    for rec in records:
        for name in _field_values(rec, COMPANY_FIELDS):
            if name != NOT_AVAILABLE:
                names.add(name)
    return sorted(names)
