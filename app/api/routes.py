# app/api/routes.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from agents.density_agent import analyze_keyword_density
from agents.metadata_agent import extract_seo_metadata
from models.density_models import AnalysisRequest
from models.export_models import ExportRequest
from services.csv_export import export_filename, rows_to_csv
from services.errors import AnalysisError, UnexpectedError

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- helpers ---------


def error_response(error: AnalysisError) -> JSONResponse:
    """Every failure ends up as HTTP 500 + {"error": message}."""
    return JSONResponse(status_code=500, content={"error": error.message})


def _run(endpoint: str, func: Callable[[], JSONResponse]) -> JSONResponse:
    """
    Top-level error funnel for a single request.
    Nothing is retried and no partial result is returned.
    """
    try:
        return func()
    except AnalysisError as e:
        logger.warning("[api.%s] %s: %s", endpoint, e.__class__.__name__, e.message)
        return error_response(e)
    except Exception as e:
        logger.exception("[api.%s] Unexpected error", endpoint)
        return error_response(UnexpectedError(e))


# --------- endpoints ---------


@router.options("/{path:path}")
def api_preflight(path: str) -> Response:
    """CORS preflight: bare 200, no body (headers are added by the middleware)."""
    return Response(status_code=200)


@router.get("/health")
def api_health() -> dict:
    return {"status": "ok"}


@router.post("/analyze-keyword-density")
def api_analyze_keyword_density(payload: Optional[AnalysisRequest] = None) -> JSONResponse:
    """
    Fetch the page at payload.url and return its top keywords:
    {"keywordDensity": [...], "totalWords": n}
    """
    url = payload.url if payload else None
    logger.info("[api.analyze-keyword-density] url=%s", url)

    def handle() -> JSONResponse:
        result = analyze_keyword_density(url)
        return JSONResponse(content=result.model_dump(by_alias=True))

    return _run("analyze-keyword-density", handle)


@router.post("/extract-seo")
def api_extract_seo(payload: Optional[AnalysisRequest] = None) -> JSONResponse:
    """Title, description, headings, paragraphs and links of payload.url."""
    url = payload.url if payload else None
    logger.info("[api.extract-seo] url=%s", url)

    def handle() -> JSONResponse:
        metadata = extract_seo_metadata(url)
        return JSONResponse(content=metadata.model_dump(by_alias=True))

    return _run("extract-seo", handle)


@router.post("/export-csv")
def api_export_csv(payload: ExportRequest) -> Response:
    """Render the posted analysis rows as a downloadable CSV file."""
    logger.info("[api.export-csv] rows=%s", len(payload.rows))
    return Response(
        content=rows_to_csv(payload.rows),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename()}",
        },
    )
