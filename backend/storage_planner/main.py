from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storage_planner.config import settings
from storage_planner.api.routes import router
from storage_planner.storage_engine.catalog import get_catalog

VERSION = "1.0.0"


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    title="Video Storage Plan Calculator",
    description=(
        "Estimate yearly video storage from film count, runtime and 4K share, "
        "and find the subscription plan that covers it."
    ),
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    return {
        "name": "Video Storage Plan Calculator",
        "version": VERSION,
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "plans": "GET /api/v1/plans/{monthly|annual}",
            "calculate": "POST /api/v1/calculate",
        },
    }


@app.get("/health")
async def health():
    """Health check, including whether the catalog loads."""
    status = {"status": "healthy", "version": VERSION}
    try:
        status["catalog_version"] = get_catalog().version
    except (OSError, ValueError) as e:
        status["status"] = "degraded"
        status["catalog"] = f"error: {e}"
    return status
