#!/usr/bin/env python3
"""
Live check: scrape the SUR page once and save the records to JSON for verification.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add parent directory to path to import sur_scraper
sys.path.insert(0, str(Path(__file__).parent.parent))

from sur_scraper.sur_scraper import scrape_sur


def main() -> None:
    print("=" * 80, flush=True)
    print("Testing SUR scraper against the live page...", flush=True)
    print("=" * 80, flush=True)

    records = [r.to_dict() for r in scrape_sur()]

    print(f"\nScraped {len(records)} submissions", flush=True)

    if not records:
        print("ERROR: No submissions scraped!", flush=True)
        sys.exit(1)

    output_dir = Path(__file__).parent.parent / "data"
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / "test_sur_records.json"

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)

    print(f"\nSaved {len(records)} submissions to: {output_file}", flush=True)
    print("\nSample submission:", flush=True)
    print(json.dumps(records[0], indent=2, ensure_ascii=False), flush=True)

    print("\n" + "=" * 80, flush=True)
    print("Test completed successfully!", flush=True)
    print("=" * 80, flush=True)


if __name__ == "__main__":
    main()
