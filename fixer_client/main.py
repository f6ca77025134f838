"""FastAPI application exposing ExchangeRateClient over HTTP."""
from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import router
from .connectors.http import HTTPTransport
from .errors import ConfigurationError, UpstreamError, ValidationError
from .models import ErrEnvelope, ErrorBody, ErrorCode
from .settings import get_settings

settings = get_settings()
logger = logging.getLogger(settings.APP_NAME)


def setup_logging(level: str):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    if not settings.FIXER_API_KEY:
        logger.warning("FIXER_API_KEY is not set; rate endpoints will fail")
    app.state.transport = HTTPTransport(timeout=settings.HTTP_TIMEOUT_SEC)
    try:
        yield
    finally:
        app.state.transport.close()
        app.state.transport = None


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(router)


def _error(status_code: int, code: ErrorCode, message: str, retriable: bool = False, details=None) -> JSONResponse:
    payload = ErrEnvelope(
        error=ErrorBody(code=code, message=message, retriable=retriable, details=details)
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError):
    return _error(400, ErrorCode.BAD_INPUT, "invalid input", details={"errors": exc.errors()})


@app.exception_handler(ValidationError)
async def validation_handler(_: Request, exc: ValidationError):
    return _error(400, ErrorCode.BAD_INPUT, str(exc))


@app.exception_handler(ConfigurationError)
async def configuration_handler(_: Request, exc: ConfigurationError):
    logger.error(f"client misconfigured: {exc}")
    return _error(500, ErrorCode.INTERNAL, str(exc))


@app.exception_handler(UpstreamError)
async def upstream_payload_handler(_: Request, exc: UpstreamError):
    logger.error(f"fixer returned an error payload: {exc.details}")
    return _error(502, ErrorCode.UPSTREAM_ERROR, str(exc), details={"upstream": exc.details})


@app.exception_handler(httpx.HTTPError)
async def upstream_handler(_: Request, exc: httpx.HTTPError):
    logger.error(f"fixer request failed: {exc!r}")
    return _error(502, ErrorCode.UPSTREAM_ERROR, "fixer request failed", retriable=True)


@app.exception_handler(json.JSONDecodeError)
async def decode_handler(_: Request, exc: json.JSONDecodeError):
    logger.error(f"fixer returned a non-JSON body: {exc}")
    return _error(502, ErrorCode.UPSTREAM_ERROR, "invalid upstream response")


@app.get("/health")
async def health():
    return {"ok": True, "data": {"status": "healthy"}, "ts": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    uvicorn.run(
        "fixer_client.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )
