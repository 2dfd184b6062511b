# services/csv_export.py

from __future__ import annotations

import csv
import io
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from models.export_models import SeoAnalysisRow

CSV_HEADERS: List[str] = [
    "URL",
    "Company",
    "Current title",
    "Current description",
    "Current H1",
    "Suggested title",
    "Suggested description",
    "Suggested H1",
    "Page load speed",
]


def _format_speed(value: Optional[float]) -> str:
    if value is None:
        return ""
    return format(value, "g")


def _row_values(row: SeoAnalysisRow) -> List[str]:
    return [
        row.url,
        row.company or "",
        row.current_title or "",
        row.current_description or "",
        row.current_h1 or "",
        row.suggested_title or "",
        row.suggested_description or "",
        row.suggested_h1 or "",
        _format_speed(row.page_load_speed),
    ]


def rows_to_csv(rows: Iterable[SeoAnalysisRow]) -> str:
    """Header line plus one line per row. Quotes inside values are doubled."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow(_row_values(row))
    return buf.getvalue()


def export_filename(now: Optional[datetime] = None) -> str:
    """seo_analysis_<UTC ISO timestamp>.csv"""
    now = now or datetime.now(timezone.utc)
    return f"seo_analysis_{now.strftime('%Y-%m-%dT%H-%M-%SZ')}.csv"
