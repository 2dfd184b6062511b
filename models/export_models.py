# models/export_models.py

from typing import List, Optional

from pydantic import BaseModel, Field


class SeoAnalysisRow(BaseModel):
    url: str
    company: Optional[str] = None
    current_title: Optional[str] = None
    current_description: Optional[str] = None
    current_h1: Optional[str] = None
    suggested_title: Optional[str] = None
    suggested_description: Optional[str] = None
    suggested_h1: Optional[str] = None
    page_load_speed: Optional[float] = None


class ExportRequest(BaseModel):
    rows: List[SeoAnalysisRow] = Field(default_factory=list)
