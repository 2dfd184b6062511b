# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import router as api_router
from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"

app = FastAPI(title="SEO Density Analyzer")


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
    response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies share the 500 / {"error": ...} shape of every other failure
    logger.warning("[api] Invalid request body path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": "Invalid request body"})


app.include_router(api_router, prefix="/api")
