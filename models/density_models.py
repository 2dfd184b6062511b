# models/density_models.py

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """
    Request body shared by the URL-based endpoints.
    url is optional at the schema level so a missing value reaches the
    analyzer and comes back as "URL is required" instead of a 422.
    """

    url: Optional[str] = None


class KeywordDensityEntry(BaseModel):
    """One ranked keyword.

    Attributes:
        keyword (str): lowercase token, longer than the minimum keyword length.
        count (int): occurrences in the visible text.
        density (float): 100 * count / totalWords.
    """

    keyword: str
    count: int = Field(..., ge=1)
    density: float = Field(..., ge=0, le=100)


class AnalysisResult(BaseModel):
    """Top keywords (count descending) plus the total token count."""

    model_config = ConfigDict(populate_by_name=True)

    keyword_density: List[KeywordDensityEntry] = Field(
        default_factory=list, alias="keywordDensity"
    )
    total_words: int = Field(0, ge=0, alias="totalWords")
