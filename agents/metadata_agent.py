# agents/metadata_agent.py

from typing import Optional
import logging

from models.site_models import SeoMetadata
from services.crawler import fetch_page
from services.html_parser import parse_seo_metadata
from services.validation import require_url

logger = logging.getLogger(__name__)


def extract_seo_metadata(url: Optional[str]) -> SeoMetadata:
    """
    Fetch one page and pull title / description / headings / links from it.
    Links are resolved against the final URL after redirects.
    """
    url = require_url(url)
    logger.info("[metadata_agent] Extracting SEO metadata: %s", url)

    page = fetch_page(url)
    metadata = parse_seo_metadata(page.url, page.html)

    logger.info(
        "[metadata_agent] Parsed successfully: %s (final_url=%s, title=%s, paragraphs=%s)",
        url,
        page.url,
        metadata.title,
        len(metadata.visible_text),
    )
    return metadata
