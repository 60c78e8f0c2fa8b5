#!/usr/bin/env python3
"""
Scrape the SUR / GSUR pages into JSON, CSV and styled XLSX artifacts.
Pass --baseline with a previous run directory to stage the changes.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sur_scraper.orchestrator import SOURCES, run_job


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape Health Canada submissions under review.")
    parser.add_argument(
        "--source",
        dest="sources",
        action="append",
        choices=sorted(SOURCES),
        help="Source to scrape; repeat for several (default: all).",
    )
    parser.add_argument(
        "--out-dir",
        dest="out_dir",
        help="Output directory. Defaults to $ARTIFACT_DIR/<timestamp>.",
    )
    parser.add_argument(
        "--baseline",
        dest="baseline_dir",
        help="Previous run directory to diff against.",
    )
    parser.add_argument(
        "--query",
        default="",
        help="Only keep records whose ingredient, company or therapeutic area contains this text.",
    )
    parser.add_argument(
        "--no-xlsx",
        action="store_true",
        help="Skip the styled XLSX export.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    summary = run_job(
        sources=tuple(args.sources or SOURCES),
        out_dir=args.out_dir,
        baseline_dir=args.baseline_dir,
        query=args.query,
        write_xlsx=not args.no_xlsx,
    )
    print(json.dumps(summary, indent=2, ensure_ascii=False), flush=True)
    failed = [name for name, res in summary["sources"].items() if "error" in res]
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
