"""Campaign plan endpoints.

POST /v1/plan accepts a raw campaign brief and always answers with exactly
one JSON body: a 400 with field errors, or a 200 carrying either a plan or
the model's raw text.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from shared.schemas.brief import SAMPLE_BRIEF, brief_options
from src.leadgen.orchestrator import PlanOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter()


def get_orchestrator() -> PlanOrchestrator:
    """One orchestrator per request; no state is shared between requests."""
    return PlanOrchestrator()


@router.post("/plan")
async def create_plan(
    request: Request,
    orchestrator: PlanOrchestrator = Depends(get_orchestrator),
):
    """Generate a lead-generation campaign plan from a brief."""
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        logger.info("Rejected plan request with a non-JSON body")
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid input",
                "issues": {"formErrors": ["Request body must be valid JSON"], "fieldErrors": {}},
            },
        )

    # The model call blocks; keep it off the event loop.
    outcome = await run_in_threadpool(orchestrator.generate, payload)
    logger.info("Plan request finished in state %s", outcome.state.value)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body())


@router.get("/plan/options")
async def plan_options():
    """Closed option sets for the brief form."""
    return brief_options()


@router.get("/plan/sample")
async def plan_sample():
    """Example brief the form pre-fills."""
    return SAMPLE_BRIEF
