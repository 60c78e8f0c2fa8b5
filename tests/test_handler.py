"""Tests for the JSON endpoint and its WSGI adapter."""

import requests

from sur_scraper import handler
from sur_scraper import sur_scraper as sur_scraper_module
from sur_scraper.errors import ParseError
from sur_scraper.handler import CORS_HEADERS, app, handle_request
from sur_scraper.sur_scraper import SubmissionRecord


def _assert_cors(resp):
    for key, value in CORS_HEADERS.items():
        assert resp.headers[key] == value


def test_options_preflight_skips_pipeline(fake_session):
    session = fake_session(text="<table></table>")

    resp = handle_request("scrape-sur", "OPTIONS", session=session)

    assert resp.status == 200
    assert resp.body == b""
    assert session.calls == []
    _assert_cors(resp)
    assert resp.headers["Access-Control-Allow-Headers"] == "authorization, x-client-info, apikey, content-type"


def test_get_success_returns_records(fake_session, load_html):
    resp = handle_request("scrape-sur", "GET", session=fake_session(text=load_html("sur_page.html")))

    assert resp.status == 200
    assert resp.headers["Content-Type"] == "application/json"
    assert resp.headers["Cache-Control"] == "public, max-age=3600"
    _assert_cors(resp)
    payload = resp.json()
    assert len(payload) == 4
    assert payload[3] == {
        "medicinal_ingredients": "Drug A",
        "year_month_accepted": "2024-01",
        "therapeutic_area": "Oncology",
        "company_sponsor_name": "Acme Inc",
        "submission_class": "Class 1",
    }


def test_empty_result_is_success(fake_session):
    resp = handle_request("scrape-sur", session=fake_session(text="<html><body><p>none</p></body></html>"))
    assert resp.status == 200
    assert resp.json() == []


def test_post_runs_pipeline_too(fake_session, load_html):
    resp = handle_request("scrape-sur", "POST", session=fake_session(text=load_html("sur_page.html")))
    assert resp.status == 200


def test_query_filters_records(fake_session, load_html):
    resp = handle_request("scrape-sur", query="eisai", session=fake_session(text=load_html("sur_page.html")))
    assert [r["medicinal_ingredients"] for r in resp.json()] == ["Lecanemab"]


def test_non_success_fetch_maps_to_500(fake_session):
    resp = handle_request("scrape-sur", session=fake_session(status=503, reason="Service Unavailable"))

    assert resp.status == 500
    assert "Cache-Control" not in resp.headers
    _assert_cors(resp)
    body = resp.json()
    assert body["error"] == "Failed to scrape SUR data"
    assert "503" in body["message"]
    assert body["message"] == "Failed to fetch SUR page: 503 Service Unavailable"


def test_transport_failure_maps_to_500(fake_session):
    resp = handle_request("scrape-sur", session=fake_session(exc=requests.Timeout("read timed out")))
    assert resp.status == 500
    assert "read timed out" in resp.json()["message"]


def test_empty_body_is_success(fake_session):
    resp = handle_request("scrape-sur", session=fake_session(text=""))
    assert resp.status == 200
    assert resp.json() == []
    _assert_cors(resp)


def test_parse_failure_maps_to_500(fake_session, monkeypatch):
    def reject(markup):
        raise ParseError("Failed to parse HTML: bad input")

    monkeypatch.setattr(sur_scraper_module, "parse_html", reject)
    resp = handle_request("scrape-sur", session=fake_session(text="<table>"))
    assert resp.status == 500
    assert resp.json()["message"].startswith("Failed to parse HTML")


def test_unexpected_error_uses_generic_message(monkeypatch):
    def boom(session=None):
        raise ValueError()

    monkeypatch.setitem(handler.FUNCTIONS, "scrape-sur", (boom, "Failed to scrape SUR data"))
    resp = handle_request("scrape-sur")

    assert resp.status == 500
    assert resp.json() == {"error": "Failed to scrape SUR data", "message": "Unknown error"}


def test_gsur_function_error_label(fake_session):
    resp = handle_request("scrape-gsur", session=fake_session(status=502, reason="Bad Gateway"))
    assert resp.json()["error"] == "Failed to scrape GSUR data"


def test_unknown_function_is_404():
    resp = handle_request("scrape-everything")
    assert resp.status == 404
    _assert_cors(resp)
    assert resp.json() == {"error": "Function not found"}


def _call_app(path, method="GET", query=""):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app({"PATH_INFO": path, "REQUEST_METHOD": method, "QUERY_STRING": query}, start_response))
    return captured["status"], captured["headers"], body


def test_wsgi_app_routes_by_last_path_segment(monkeypatch):
    records = [SubmissionRecord("Abrocitinib", "2024-01", "Dermatology", "Pfizer Canada ULC", "New active substance")]
    monkeypatch.setitem(handler.FUNCTIONS, "scrape-sur", (lambda session=None: records, "Failed to scrape SUR data"))

    status, headers, body = _call_app("/functions/v1/scrape-sur/")

    assert status == "200 OK"
    assert headers["Content-Length"] == str(len(body))
    assert headers["Access-Control-Allow-Origin"] == "*"
    assert b"Abrocitinib" in body


def test_wsgi_app_query_and_options(monkeypatch):
    records = [
        SubmissionRecord("Abrocitinib", therapeutic_area="Dermatology"),
        SubmissionRecord("Lecanemab", therapeutic_area="Neurology"),
    ]
    monkeypatch.setitem(handler.FUNCTIONS, "scrape-sur", (lambda session=None: records, "Failed to scrape SUR data"))

    _, _, body = _call_app("/scrape-sur", query="q=neuro")
    assert b"Lecanemab" in body and b"Abrocitinib" not in body

    status, _, body = _call_app("/scrape-sur", method="OPTIONS")
    assert status == "200 OK"
    assert body == b""


def test_wsgi_app_unknown_path():
    status, _, _ = _call_app("/")
    assert status == "404 Not Found"


def test_company_and_area_filters(fake_session, load_html):
    session = fake_session(text=load_html("sur_page.html"))

    by_company = handle_request("scrape-sur", company="EISAI", session=session)
    assert [r["medicinal_ingredients"] for r in by_company.json()] == ["Lecanemab"]

    # "eisai" is a company, never an area
    by_area = handle_request("scrape-sur", area="eisai", session=session)
    assert by_area.status == 200
    assert by_area.json() == []


def test_wsgi_app_area_param(monkeypatch):
    records = [
        SubmissionRecord("Abrocitinib", therapeutic_area="Dermatology"),
        SubmissionRecord("Lecanemab", therapeutic_area="Neurology"),
    ]
    monkeypatch.setitem(handler.FUNCTIONS, "scrape-sur", (lambda session=None: records, "Failed to scrape SUR data"))

    _, _, body = _call_app("/scrape-sur", query="area=derm")
    assert b"Abrocitinib" in body and b"Lecanemab" not in body
