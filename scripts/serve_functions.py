#!/usr/bin/env python3
"""
Serve scrape-sur / scrape-gsur locally:
  GET http://127.0.0.1:8000/functions/v1/scrape-sur[?q=...]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sur_scraper import config
from sur_scraper.handler import serve


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the scraper functions over HTTP.")
    parser.add_argument("--host", default=config.SERVER_HOST)
    parser.add_argument("--port", type=int, default=config.SERVER_PORT)
    args = parser.parse_args()
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        print("\nStopped.", flush=True)


if __name__ == "__main__":
    main()
