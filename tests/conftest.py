"""
conftest.py — shared pytest fixtures
Puts the project root on sys.path so `app.*`, `services.*` etc. resolve
regardless of where pytest is invoked from.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient
from app.main import app


@pytest.fixture(scope="session")
def client():
    """Synchronous test client; outbound HTTP is always mocked."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def page_url():
    return "https://example.com/home"


@pytest.fixture
def make_response():
    """Factory for a minimal stand-in of requests.Response."""
    def _make(text="", status_code=200, reason="OK", url=None):
        resp = MagicMock()
        resp.text = text
        resp.content = text.encode("utf-8")
        resp.headers = {"Content-Type": "text/html; charset=utf-8"}
        resp.status_code = status_code
        resp.reason = reason
        resp.ok = status_code < 400
        resp.url = url
        return resp
    return _make
