# services/html_parser.py

from __future__ import annotations

import re
from typing import List
from urllib.parse import urldefrag, urljoin, urlparse
import logging

from bs4 import BeautifulSoup

from models.site_models import SeoMetadata

logger = logging.getLogger(__name__)

# Elements whose content is never shown to the reader
INVISIBLE_TAGS = ["script", "style"]

# href schemes that never point at a crawlable page
_SKIPPED_SCHEMES = ("mailto:", "tel:", "javascript:", "data:")

_WHITESPACE_RE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_visible_text(html: str) -> str:
    """
    Reduce an HTML document to its visible text.

    - <script> / <style> are dropped together with their content
    - every remaining tag becomes a single space
    - whitespace runs collapse to one space, ends are trimmed
    - the result is lowercased
    """
    soup = BeautifulSoup(html or "", "html.parser")
    for tag in soup(INVISIBLE_TAGS):
        tag.decompose()
    text = soup.get_text(separator=" ")
    return _collapse(text).lower()


def _heading_texts(soup: BeautifulSoup, name: str) -> List[str]:
    """Non-empty texts of every <name> heading, in document order."""
    texts: List[str] = []
    for tag in soup.find_all(name):
        text = _collapse(tag.get_text(" "))
        if text:
            texts.append(text)
    return texts


def _split_links(soup: BeautifulSoup, page_url: str) -> tuple[List[str], List[str]]:
    """
    Resolve every <a href> against the page URL and split by host.
    Fragments are dropped and duplicates removed (first-seen order kept).
    """
    page_host = urlparse(page_url).netloc.lower()
    internal: List[str] = []
    external: List[str] = []
    seen = set()

    for a in soup.find_all("a", href=True):
        href = a["href"].strip()
        if not href or href.lower().startswith(_SKIPPED_SCHEMES):
            continue

        try:
            absolute, _ = urldefrag(urljoin(page_url, href))
            parsed = urlparse(absolute)
        except ValueError:
            # e.g. "http://[broken": unparseable, skip just this link
            logger.debug("[html_parser] Skipping malformed href=%r", href)
            continue
        if parsed.scheme not in ("http", "https") or absolute in seen:
            continue
        seen.add(absolute)

        if parsed.netloc.lower() == page_host:
            internal.append(absolute)
        else:
            external.append(absolute)

    return internal, external


def parse_seo_metadata(url: str, html: str) -> SeoMetadata:
    """
    Parse an HTML string into SeoMetadata.
    No network access here; the caller fetches with crawler.fetch_html().
    """
    soup = BeautifulSoup(html or "", "html.parser")

    title = _collapse(soup.title.get_text(" ")) if soup.title else ""

    meta_desc_tag = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
    description = _collapse(meta_desc_tag.get("content") or "") if meta_desc_tag else ""

    h1_list = _heading_texts(soup, "h1")

    # links are read before stripping scripts so the tree is complete
    internal_links, external_links = _split_links(soup, url)

    for tag in soup(INVISIBLE_TAGS):
        tag.decompose()
    paragraphs = [text for text in (_collapse(p.get_text(" ")) for p in soup.find_all("p")) if text]

    metadata = SeoMetadata(
        url=url,
        title=title,
        description=description,
        h1=h1_list[0] if h1_list else "",
        h2s=_heading_texts(soup, "h2"),
        h3s=_heading_texts(soup, "h3"),
        h4s=_heading_texts(soup, "h4"),
        visible_text=paragraphs,
        internal_links=internal_links,
        external_links=external_links,
    )

    logger.info(
        "[html_parser] Parsed url=%s h1=%s h2=%s internal=%s external=%s",
        url,
        bool(metadata.h1),
        len(metadata.h2s),
        len(internal_links),
        len(external_links),
    )
    return metadata
