# sur_scraper/fetcher.py
from __future__ import annotations
from typing import Optional

import requests
from requests import RequestException

from . import config
from .debug import dbg
from .errors import FetchError

REQUEST_HEADERS = {
    "User-Agent": config.USER_AGENT,
    "Accept": config.ACCEPT,
}

def fetch_html(url: str, label: str, session: Optional[requests.Session] = None) -> str:
    """
    Single GET of a source page. No retry: a failure surfaces as FetchError
    and the caller decides whether to run the whole scrape again.
    """
    http = session or requests
    dbg(f"[FETCH] Fetching {label} page...")
    try:
        resp = http.get(url, headers=REQUEST_HEADERS, timeout=config.TIMEOUT)
    except RequestException as exc:
        raise FetchError(f"Failed to fetch {label} page: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        reason = resp.reason or ""
        raise FetchError(
            f"Failed to fetch {label} page: {resp.status_code} {reason}".rstrip(),
            status=resp.status_code,
            status_text=reason,
        )

    html = resp.text
    dbg(f"[FETCH] Received {len(html)} bytes of HTML")
    return html
