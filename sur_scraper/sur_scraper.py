# sur_scraper/sur_scraper.py
"""
Submissions Under Review (SUR) scraper.

Health Canada publishes the SUR listing as an HTML page only. Pipeline:
fetch -> parse -> classify tables / resolve columns -> extract rows, with a
positional fallback pass when the header heuristics find nothing.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from . import config
from .columns import ColumnMapping, DEFAULT_COLUMNS, classify_tables
from .debug import dbg
from .fetcher import fetch_html
from .parsing import body_rows, cell_text, find_tables, parse_html, row_cells

NOT_AVAILABLE = "Not available"

STRICT_MIN_CELLS     = 3
PERMISSIVE_MIN_CELLS = 4
# A stray header row in a table body starts with "Medicinal ingredient(s)"
HEADER_ROW_MARKER    = "Medicinal"

# Wire field order, as served to the dashboard
SUR_COLS = [
    "medicinal_ingredients",
    "year_month_accepted",
    "therapeutic_area",
    "company_sponsor_name",
    "submission_class",
]


@dataclass(frozen=True)
class SubmissionRecord:
    medicinal_ingredient: str
    year_month_accepted: str = ""
    therapeutic_area: str = ""
    company_sponsor_name: str = NOT_AVAILABLE
    submission_class: str = NOT_AVAILABLE

    def to_dict(self) -> Dict[str, str]:
        return {
            "medicinal_ingredients": self.medicinal_ingredient,
            "year_month_accepted": self.year_month_accepted,
            "therapeutic_area": self.therapeutic_area,
            "company_sponsor_name": self.company_sponsor_name,
            "submission_class": self.submission_class,
        }


def _record_from_cells(cells, mapping: ColumnMapping) -> SubmissionRecord:
    # company/class: absent and blank cells both become the sentinel; ingredient stays blank
    return SubmissionRecord(
        medicinal_ingredient=cell_text(cells, mapping["ingredient"]),
        year_month_accepted=cell_text(cells, mapping["date"]),
        therapeutic_area=cell_text(cells, mapping["area"]),
        company_sponsor_name=cell_text(cells, mapping["company"]) or NOT_AVAILABLE,
        submission_class=cell_text(cells, mapping["class"]) or NOT_AVAILABLE,
    )

# ----------------------------------
# Extraction passes
# ----------------------------------
def extract_strict(doc: BeautifulSoup) -> List[SubmissionRecord]:
    """Header-driven pass over the tables that look like submission listings."""
    records: List[SubmissionRecord] = []
    for table, mapping in classify_tables(doc):
        for tr in body_rows(table):
            cells = row_cells(tr)
            if len(cells) < STRICT_MIN_CELLS:
                continue
            rec = _record_from_cells(cells, mapping)
            if rec.medicinal_ingredient:
                records.append(rec)
    return records

def extract_permissive(doc: BeautifulSoup) -> List[SubmissionRecord]:
    """Positional pass over every table; used when the page layout drifted."""
    records: List[SubmissionRecord] = []
    for table in find_tables(doc):
        for tr in body_rows(table):
            cells = row_cells(tr)
            if len(cells) < PERMISSIVE_MIN_CELLS:
                continue
            rec = _record_from_cells(cells, DEFAULT_COLUMNS)
            if rec.medicinal_ingredient and HEADER_ROW_MARKER not in rec.medicinal_ingredient:
                records.append(rec)
    return records

def extract_submissions(doc: BeautifulSoup) -> List[SubmissionRecord]:
    records = extract_strict(doc)
    if not records:
        dbg("[SUR] No entries found via table parsing, trying positional fallback...")
        records = extract_permissive(doc)
    dbg(f"[SUR] Extracted {len(records)} SUR entries")
    return records

# ----------------------------------
# Entrypoint
# ----------------------------------
def scrape_sur(session: Optional[requests.Session] = None) -> List[SubmissionRecord]:
    html = fetch_html(config.SUR_URL, "SUR", session=session)
    doc = parse_html(html)
    return extract_submissions(doc)

if __name__ == "__main__":
    rows = scrape_sur()
    print({"rows": len(rows), "sample": rows[0].to_dict() if rows else None})
