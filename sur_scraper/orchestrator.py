# sur_scraper/orchestrator.py
import os, json, time
from typing import Optional
import pandas as pd
import requests

from . import config
from .diffing import compute_diff
from .excel import save_styled_excel
from .gsur_scraper import GSUR_COLS, scrape_gsur
from .search import companies, filter_records, therapeutic_areas
from .sur_scraper import SUR_COLS, scrape_sur

# source -> (scraper, wire columns, sheet name)
SOURCES = {
    "sur":  (scrape_sur,  SUR_COLS,  "SUR"),
    "gsur": (scrape_gsur, GSUR_COLS, "GSUR"),
}

def _load_rows(path: str) -> list[dict]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"JSON root must be a list: {path}")
    return data

def _write_artifacts(rows: list[dict], cols: list[str], sheet: str, out_dir: str, name: str, write_xlsx: bool) -> dict:
    json_path = os.path.join(out_dir, f"{name}.json")
    csv_path  = os.path.join(out_dir, f"{name}.csv")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(rows, f, ensure_ascii=False, indent=2)
    df = pd.DataFrame(rows, columns=cols)
    df.to_csv(csv_path, index=False)
    paths = {"json": json_path, "csv": csv_path}
    if write_xlsx:
        xlsx_path = os.path.join(out_dir, f"{name}.xlsx")
        save_styled_excel(df, xlsx_path, sheet=sheet)
        paths["xlsx"] = xlsx_path
    return paths

def run_job(
    sources: tuple = ("sur", "gsur"),
    out_dir: Optional[str] = None,
    baseline_dir: Optional[str] = None,
    query: str = "",
    write_xlsx: bool = True,
    session: Optional[requests.Session] = None,
) -> dict:
    """
    Scrape each source into <out_dir>/<source>.{json,csv,xlsx}. With a
    baseline_dir (a previous run's directory), stage added/removed/modified
    rows next to the snapshot. One failing source doesn't stop the others.
    """
    started = time.time()
    if out_dir is None:
        out_dir = os.path.join(config.ARTIFACT_DIR, time.strftime("%Y%m%d_%H%M%S"))
    os.makedirs(out_dir, exist_ok=True)

    summary = {"saved_dir": out_dir, "sources": {}}
    for name in sources:
        if name not in SOURCES:
            raise ValueError(f"Unknown source: {name!r} (expected one of {', '.join(SOURCES)})")
        scraper, cols, sheet = SOURCES[name]
        try:
            records = filter_records(scraper(session=session), query)
        except Exception as e:
            print(f"[run_job] {name} scrape failed:", repr(e), flush=True)
            summary["sources"][name] = {"error": str(e) or "Unknown error"}
            continue

        rows = [r.to_dict() for r in records]
        result = {
            "rows": len(rows),
            "paths": _write_artifacts(rows, cols, sheet, out_dir, name, write_xlsx),
            "therapeutic_areas": therapeutic_areas(records),
            "companies": len(companies(records)),
        }

        baseline_path = os.path.join(baseline_dir, f"{name}.json") if baseline_dir else None
        if baseline_path and os.path.exists(baseline_path):
            added, removed, modified = compute_diff(rows, _load_rows(baseline_path), cols)
            changes_path = os.path.join(out_dir, f"{name}_changes.json")
            with open(changes_path, "w", encoding="utf-8") as f:
                json.dump({"added": added, "removed": removed, "modified": modified}, f, ensure_ascii=False, indent=2)
            result.update({
                "added": len(added),
                "removed": len(removed),
                "modified": len(modified),
            })
            result["paths"]["changes"] = changes_path

        summary["sources"][name] = result

    summary["elapsed_sec"] = round(time.time() - started, 1)
    return summary
