# services/keyword_density.py

from __future__ import annotations

from collections import Counter
from typing import List

from models.density_models import AnalysisResult, KeywordDensityEntry
from services.html_parser import extract_visible_text

# Tokens must be strictly longer than this to be ranked
DEFAULT_MIN_KEYWORD_LENGTH: int = 3

# Number of ranked keywords returned
DEFAULT_TOP_KEYWORDS: int = 20


def tokenize(text: str) -> List[str]:
    """Whitespace split. Empty / blank text yields no tokens."""
    return text.split()


def count_keywords(
    tokens: List[str],
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> Counter:
    """
    Occurrence count per token longer than min_length.
    Keys are kept in first-seen order.
    """
    freq: Counter = Counter()
    for token in tokens:
        if len(token) > min_length:
            freq[token] += 1
    return freq


def keyword_density(count: int, total_words: int) -> float:
    """100 * count / total_words, 0.0 when there are no words at all."""
    if total_words <= 0:
        return 0.0
    return count / total_words * 100


def rank_keywords(
    freq: Counter,
    total_words: int,
    limit: int = DEFAULT_TOP_KEYWORDS,
) -> List[KeywordDensityEntry]:
    """
    Sort by count descending and keep the first `limit` entries.

    sorted() is stable and Counter preserves insertion order, so equal counts
    stay in the order the tokens were first seen.
    """
    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)
    return [
        KeywordDensityEntry(
            keyword=keyword,
            count=count,
            density=keyword_density(count, total_words),
        )
        for keyword, count in ranked[:max(limit, 0)]
    ]


def analyze_text(
    text: str,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
    limit: int = DEFAULT_TOP_KEYWORDS,
) -> AnalysisResult:
    """Density analysis of already-normalized visible text."""
    tokens = tokenize(text)
    total_words = len(tokens)
    freq = count_keywords(tokens, min_length=min_length)
    return AnalysisResult(
        keyword_density=rank_keywords(freq, total_words, limit=limit),
        total_words=total_words,
    )


def analyze_html(
    html: str,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
    limit: int = DEFAULT_TOP_KEYWORDS,
) -> AnalysisResult:
    """Strip markup from an HTML document, then run analyze_text()."""
    return analyze_text(extract_visible_text(html), min_length=min_length, limit=limit)
