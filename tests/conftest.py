"""Shared test fixtures: HTML fixtures and a fake requests session."""

from pathlib import Path

import pytest
import requests

FIXTURES = Path(__file__).parent / "fixtures"


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


def build_response(status=200, text="", reason="OK", url="https://www.canada.ca/"):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


@pytest.fixture
def load_html():
    def _load(name: str) -> str:
        with open(FIXTURES / name, "r", encoding="utf-8") as handle:
            return handle.read()
    return _load


@pytest.fixture
def fake_session():
    """Factory: fake_session(text=..., status=..., reason=..., exc=...)."""
    def _make(text="", status=200, reason="OK", exc=None):
        return FakeSession(response=build_response(status, text, reason), exc=exc)
    return _make
