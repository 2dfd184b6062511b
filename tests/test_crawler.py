"""
services.crawler with real requests.Response objects (charset handling,
final URL after redirects).
"""
from unittest.mock import patch

import requests
from requests.utils import get_encoding_from_headers

from agents.density_agent import analyze_keyword_density
from agents.metadata_agent import extract_seo_metadata
from services.crawler import fetch_page


def real_response(body: bytes, content_type: str, url: str = "https://example.com/"):
    """A requests.Response built the way requests builds one off the wire."""
    resp = requests.Response()
    resp.status_code = 200
    resp.reason = "OK"
    resp._content = body
    resp.headers["Content-Type"] = content_type
    resp.encoding = get_encoding_from_headers(resp.headers)
    resp.url = url
    return resp


class TestCharset:
    def test_meta_charset_wins_over_latin1_default(self):
        body = "<meta charset='utf-8'><p>été café été</p>".encode("utf-8")
        resp = real_response(body, "text/html")
        with patch("services.crawler.requests.get", return_value=resp):
            result = analyze_keyword_density("https://example.com/")

        assert result.total_words == 3
        assert [(e.keyword, e.count) for e in result.keyword_density] == [("café", 1)]

    def test_utf8_without_any_declaration(self):
        resp = real_response("<p>naïve résumé</p>".encode("utf-8"), "text/html")
        with patch("services.crawler.requests.get", return_value=resp):
            assert "naïve résumé" in fetch_page("https://example.com/").html

    def test_header_charset_is_respected(self):
        resp = real_response("<p>déjà</p>".encode("latin-1"), "text/html; charset=ISO-8859-1")
        with patch("services.crawler.requests.get", return_value=resp):
            assert "déjà" in fetch_page("https://example.com/").html


class TestRedirects:
    def test_fetch_page_reports_final_url(self):
        resp = real_response(b"<p>x</p>", "text/html; charset=utf-8", url="https://www.example.com/")
        with patch("services.crawler.requests.get", return_value=resp):
            page = fetch_page("http://example.com")
        assert page.url == "https://www.example.com/"

    def test_links_classified_against_redirect_target(self):
        html = (
            b"<a href='https://www.example.com/about'>about</a>"
            b"<a href='/pricing'>pricing</a>"
            b"<a href='https://other.org/'>other</a>"
        )
        resp = real_response(html, "text/html; charset=utf-8", url="https://www.example.com/")
        with patch("services.crawler.requests.get", return_value=resp):
            meta = extract_seo_metadata("http://example.com")

        assert meta.url == "https://www.example.com/"
        assert meta.internal_links == [
            "https://www.example.com/about",
            "https://www.example.com/pricing",
        ]
        assert meta.external_links == ["https://other.org/"]
