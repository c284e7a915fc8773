"""FastAPI application: Pipeline Pilot API.

Serves the campaign plan endpoint consumed by the brief form.
"""

from __future__ import annotations

import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import __version__

from .routers import plan

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Pipeline Pilot API",
    version=__version__,
    description="Lead-generation campaign blueprints: LLM plan with heuristic fallback",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
ALLOWED_ORIGINS = os.environ.get(
    "CORS_ORIGINS",
    "http://localhost:3000",
).split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in ALLOWED_ORIGINS],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(plan.router, prefix="/v1", tags=["plan"])
# Legacy path the web form posts to.
app.include_router(plan.router, prefix="/api", tags=["plan"], include_in_schema=False)


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/")
async def root():
    return {"message": "Pipeline Pilot API", "docs": "/docs"}
