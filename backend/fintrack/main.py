from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fintrack.api import auth, dashboard
from fintrack.config import settings
from fintrack.database import engine
from fintrack.reporting.records import InvalidRecordError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Starting FinTrack API (timezone=%s)", settings.TIMEZONE)
    yield
    await engine.dispose()


app = FastAPI(title="FinTrack API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRecordError)
async def invalid_record_handler(request: Request, exc: InvalidRecordError) -> JSONResponse:
    logger.error("Report %s failed on a malformed record: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "record": exc.record_ref},
    )


api_prefix = "/api/v1"
app.include_router(auth.router, prefix=api_prefix)
app.include_router(dashboard.router, prefix=api_prefix)


@app.get("/api/v1/health")
async def health() -> dict:
    return {"status": "ok"}
