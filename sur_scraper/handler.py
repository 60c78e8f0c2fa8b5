# sur_scraper/handler.py
"""
JSON endpoint for the scrapers, shaped like the dashboard's edge functions:
CORS on every response, OPTIONS preflight, 200 + JSON array on success,
500 + {"error", "message"} on any failure.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

import requests

from . import config
from .gsur_scraper import scrape_gsur
from .search import filter_by_company, filter_by_therapeutic_area, filter_records
from .sur_scraper import scrape_sur

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# function name -> (scraper, error label)
FUNCTIONS: Dict[str, Tuple[Callable, str]] = {
    "scrape-sur":  (scrape_sur,  "Failed to scrape SUR data"),
    "scrape-gsur": (scrape_gsur, "Failed to scrape GSUR data"),
}


@dataclass
class Response:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self):
        return json.loads(self.body.decode("utf-8"))


def _json_response(status: int, payload, extra_headers: Optional[Dict[str, str]] = None) -> Response:
    headers = {**CORS_HEADERS, "Content-Type": "application/json"}
    if extra_headers:
        headers.update(extra_headers)
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    return Response(status=status, headers=headers, body=body)

def handle_request(
    function: str,
    method: str = "GET",
    query: str = "",
    session: Optional[requests.Session] = None,
    company: str = "",
    area: str = "",
) -> Response:
    entry = FUNCTIONS.get(function)
    if entry is None:
        return _json_response(404, {"error": "Function not found"})

    if method.upper() == "OPTIONS":
        return Response(status=200, headers=dict(CORS_HEADERS))

    scraper, error_label = entry
    try:
        records = scraper(session=session)
        records = filter_records(records, query)
        records = filter_by_company(records, company)
        records = filter_by_therapeutic_area(records, area)
        payload = [r.to_dict() for r in records]
    except Exception as exc:
        print(f"[{function}] scraper error:", repr(exc), flush=True)
        return _json_response(500, {"error": error_label, "message": str(exc) or "Unknown error"})

    return _json_response(200, payload, {"Cache-Control": f"public, max-age={config.CACHE_MAX_AGE}"})

# ----------------------------------
# WSGI
# ----------------------------------
def _status_line(code: int) -> str:
    return f"{code} {HTTPStatus(code).phrase}"

def app(environ, start_response) -> List[bytes]:
    path = (environ.get("PATH_INFO") or "").rstrip("/")
    function = path.rsplit("/", 1)[-1]
    params = parse_qs(environ.get("QUERY_STRING") or "")

    def first(name: str) -> str:
        return (params.get(name) or [""])[0]

    resp = handle_request(
        function,
        environ.get("REQUEST_METHOD", "GET"),
        query=first("q"),
        company=first("company"),
        area=first("area"),
    )
    headers = list(resp.headers.items()) + [("Content-Length", str(len(resp.body)))]
    start_response(_status_line(resp.status), headers)
    return [resp.body]

def serve(host: str = config.SERVER_HOST, port: int = config.SERVER_PORT) -> None:
    with make_server(host, port, app) as httpd:
        print(f"[serve] listening on http://{host}:{port} ({', '.join(FUNCTIONS)})", flush=True)
        httpd.serve_forever()
