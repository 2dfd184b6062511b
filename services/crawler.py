# services/crawler.py

import logging
from typing import NamedTuple

import requests
from bs4 import UnicodeDammit

from app.config import settings
from services.errors import FetchError

logger = logging.getLogger(__name__)


class FetchedDocument(NamedTuple):
    # final URL after redirects
    url: str
    html: str


def _decode_body(resp: requests.Response) -> str:
    """
    Body as text.
    Without a charset in Content-Type, requests falls back to ISO-8859-1 for
    text/*; the bytes are decoded from <meta charset> / BOM instead, then UTF-8.
    """
    content_type = resp.headers.get("Content-Type") or ""
    if "charset" in content_type.lower():
        return resp.text

    dammit = UnicodeDammit(resp.content, user_encodings=["utf-8"], is_html=True)
    if dammit.unicode_markup is None:
        return resp.text
    return dammit.unicode_markup


def fetch_page(url: str, timeout: float | None = None) -> FetchedDocument:
    """
    Plain GET of a single page.
    No retries, no parallelism: one request, one document.
    Raises FetchError on transport failure or a non-2xx status.
    """
    headers = {
        "User-Agent": settings.user_agent,
    }
    if timeout is None:
        timeout = settings.request_timeout_seconds

    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("[crawler] Request failed: url=%s error=%s", url, e)
        raise FetchError(f"Failed to fetch URL: {e}", status_text=str(e)) from e

    if not resp.ok:
        status_text = resp.reason or str(resp.status_code)
        logger.warning(
            "[crawler] Non-2xx status: url=%s status=%s reason=%s",
            url,
            resp.status_code,
            status_text,
        )
        raise FetchError(
            f"Failed to fetch URL: {status_text}",
            status_code=resp.status_code,
            status_text=status_text,
        )

    html = _decode_body(resp)
    final_url = resp.url or url
    logger.info(
        "[crawler] Fetched url=%s final_url=%s status=%s length=%s",
        url,
        final_url,
        resp.status_code,
        len(html),
    )
    return FetchedDocument(url=final_url, html=html)


def fetch_html(url: str, timeout: float | None = None) -> str:
    """fetch_page() when only the document text matters."""
    return fetch_page(url, timeout=timeout).html
