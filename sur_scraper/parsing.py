# sur_scraper/parsing.py
from __future__ import annotations
from typing import List

from bs4 import BeautifulSoup, Tag

from .errors import ParseError

def parse_html(markup) -> BeautifulSoup:
    # An empty body is still a document (with no tables); only non-text input is rejected
    if not isinstance(markup, (str, bytes)):
        raise ParseError(f"Failed to parse HTML: expected text, got {type(markup).__name__}")
    try:
        return BeautifulSoup(markup, "lxml")
    except Exception as exc:
        raise ParseError(f"Failed to parse HTML: {exc}") from exc

# ----------------------------------
# Structural queries
# ----------------------------------
def find_tables(doc: BeautifulSoup) -> List[Tag]:
    return doc.find_all("table")

def header_texts(table: Tag) -> List[str]:
    return [th.get_text().lower() for th in table.find_all("th")]

def body_rows(table: Tag) -> List[Tag]:
    """Rows under <tbody>, or directly under the table (implicit tbody). <thead>/<tfoot> rows are skipped."""
    rows = []
    for tr in table.find_all("tr"):
        section = tr.find_parent(["thead", "tbody", "tfoot", "table"])
        if section is None or section.name in ("tbody", "table"):
            rows.append(tr)
    return rows

def row_cells(row: Tag) -> List[Tag]:
    return row.find_all("td")

def cell_text(cells: List[Tag], index: int) -> str:
    if index < 0 or index >= len(cells):
        return ""
    return cells[index].get_text().strip()
