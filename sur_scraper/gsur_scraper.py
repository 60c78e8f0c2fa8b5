# sur_scraper/gsur_scraper.py
"""Generic Submissions Under Review (GSUR) scraper. Same page family as SUR, one table, fixed columns."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests
from bs4 import BeautifulSoup, Tag

from . import config
from .debug import dbg
from .fetcher import fetch_html
from .parsing import body_rows, cell_text, find_tables, header_texts, parse_html, row_cells
from .sur_scraper import NOT_AVAILABLE

GSUR_MIN_CELLS = 4

GSUR_COLS = [
    "medicinal_ingredients",
    "company_name",
    "therapeutic_area",
    "year_month_accepted",
]


@dataclass(frozen=True)
class GenericSubmissionRecord:
    medicinal_ingredient: str
    company_name: str = NOT_AVAILABLE
    therapeutic_area: str = ""
    year_month_accepted: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "medicinal_ingredients": self.medicinal_ingredient,
            "company_name": self.company_name,
            "therapeutic_area": self.therapeutic_area,
            "year_month_accepted": self.year_month_accepted,
        }


def find_gsur_table(doc: BeautifulSoup) -> Optional[Tag]:
    tables = find_tables(doc)
    for table in tables:
        headers = header_texts(table)
        if (any("medicinal ingredient" in h for h in headers)
                and any("company" in h or "sponsor" in h for h in headers)):
            return table
    # fallback: first table with body rows
    for table in tables:
        if body_rows(table):
            return table
    return None

def extract_generic_submissions(doc: BeautifulSoup) -> List[GenericSubmissionRecord]:
    table = find_gsur_table(doc)
    if table is None:
        dbg("[GSUR] No GSUR table found")
        return []

    records: List[GenericSubmissionRecord] = []
    for tr in body_rows(table):
        cells = row_cells(tr)
        if len(cells) < GSUR_MIN_CELLS:
            continue
        rec = GenericSubmissionRecord(
            medicinal_ingredient=cell_text(cells, 0),
            company_name=cell_text(cells, 1) or NOT_AVAILABLE,
            therapeutic_area=cell_text(cells, 2),
            year_month_accepted=cell_text(cells, 3),
        )
        if rec.medicinal_ingredient:
            records.append(rec)
    dbg(f"[GSUR] Extracted {len(records)} GSUR entries")
    return records

def scrape_gsur(session: Optional[requests.Session] = None) -> List[GenericSubmissionRecord]:
    html = fetch_html(config.GSUR_URL, "GSUR", session=session)
    doc = parse_html(html)
    return extract_generic_submissions(doc)
