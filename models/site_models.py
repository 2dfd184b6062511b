# models/site_models.py

from __future__ import annotations

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class SeoMetadata(BaseModel):
    """
    On-page SEO signals for a single URL.
    Serialized with camelCase keys for the frontend.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: str = ""
    description: str = ""

    # only the first h1 is kept
    h1: str = ""
    h2s: List[str] = Field(default_factory=list)
    h3s: List[str] = Field(default_factory=list)
    h4s: List[str] = Field(default_factory=list)

    # paragraph texts, in document order
    visible_text: List[str] = Field(default_factory=list, alias="visibleText")

    # absolute http(s) links, deduplicated, split by host
    internal_links: List[str] = Field(default_factory=list, alias="internalLinks")
    external_links: List[str] = Field(default_factory=list, alias="externalLinks")
