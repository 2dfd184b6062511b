# agents/density_agent.py

from __future__ import annotations

import logging
from typing import Optional

from app.config import settings
from models.density_models import AnalysisResult
from services.crawler import fetch_html
from services.keyword_density import analyze_html
from services.validation import require_url

logger = logging.getLogger(__name__)


def analyze_keyword_density(url: Optional[str]) -> AnalysisResult:
    """
    Fetch one page and rank its most frequent keywords.

      1) validate url
      2) crawler.fetch_html()
      3) keyword_density.analyze_html() with the configured thresholds
    """
    url = require_url(url)
    logger.info("[density_agent] Received URL to analyze: %s", url)

    html = fetch_html(url)

    result = analyze_html(
        html,
        min_length=settings.min_keyword_length,
        limit=settings.top_keywords_limit,
    )

    logger.info(
        "[density_agent] Analysis complete url=%s total_words=%s keywords=%s",
        url,
        result.total_words,
        len(result.keyword_density),
    )
    return result
