"""FastAPI Application Entry Point.

Configures the app, CORS, and includes the NCDS generation routes.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ncds_html.logging_config import get_api_logger

logger = get_api_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warn about optional integrations
    from ncds_html.config import FIGMA_TOKEN
    if not FIGMA_TOKEN:
        logger.warning(
            "FIGMA_TOKEN not set, /api/v2/ncds/generate-figma endpoint will be unavailable. "
            "Set FIGMA_TOKEN in the environment to enable Figma integration."
        )
    yield


app = FastAPI(title="NCDS HTML Generator API", version="1.0.0", lifespan=lifespan)

# CORS configuration, configurable via CORS_ORIGINS env var (comma-separated)
_default_origins = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _default_origins).split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from .routes.ncds import router as ncds_router  # noqa: E402

app.include_router(ncds_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}
