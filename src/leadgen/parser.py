"""Plan parsing and recovery for raw model output.

Two attempts, in order:

1. Decode the whole text as JSON and validate it as a :class:`CampaignPlan`.
2. Decode the span from the first ``{`` to the last ``}`` and validate that.
   This covers answers wrapped in prose or markdown code fences.

Anything else is handed back verbatim so the caller can show the model's
literal answer instead of a fabricated structure.

Known limitation: step 2 takes the *outermost* brace span, not the first
balanced object.  Prose that contains a stray ``{`` before the real JSON,
or a stray ``}`` after it, widens the span past the object and the decode
fails; the text is then surfaced raw.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from shared.schemas.plan import CampaignPlan

logger = logging.getLogger(__name__)

RECOVERED_NOTICE = "Recovered a structured plan from surrounding model text."
UNPARSEABLE_NOTICE = "model output could not be parsed as a structured plan"


@dataclass
class PlanParseResult:
    """Either a plan (``raw`` is None) or the raw text with a notice."""

    plan: Optional[CampaignPlan] = None
    raw: Optional[str] = None
    message: Optional[str] = None

    @property
    def recovered(self) -> bool:
        return self.plan is not None and self.message is not None


def _decode(text: str) -> Optional[CampaignPlan]:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow.
        return None
    try:
        return CampaignPlan.model_validate(data)
    except ValidationError as e:
        logger.debug("Decoded JSON is not a campaign plan: %d errors", e.error_count())
        return None


def extract_outer_braces(text: str) -> Optional[str]:
    """Return the substring from the first ``{`` to the last ``}``, if any."""
    start = text.find("{")
    end = text.rfind("}")
    if start >= 0 and end > start:
        return text[start:end + 1]
    return None


def parse_plan(model_text: str) -> PlanParseResult:
    """Turn raw model text into a plan, recovering from wrapped JSON."""
    plan = _decode(model_text)
    if plan is not None:
        return PlanParseResult(plan=plan)

    candidate = extract_outer_braces(model_text)
    if candidate is not None:
        plan = _decode(candidate)
        if plan is not None:
            logger.info(
                "Recovered plan from model output (%d of %d chars)",
                len(candidate), len(model_text),
            )
            return PlanParseResult(plan=plan, message=RECOVERED_NOTICE)

    logger.warning(
        "Model output could not be parsed as a plan (%d chars, head=%r)",
        len(model_text), model_text[:80],
    )
    return PlanParseResult(raw=model_text, message=UNPARSEABLE_NOTICE)
