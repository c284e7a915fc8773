"""Plan Orchestrator -- turns one request body into exactly one response.

Flow:
    Validating     -> Rejected (400) on bad input
    Dispatching    -> FallbackNoKey when no OpenAI credential is configured
    CallingModel   -> FallbackOnError when the call raises
                   -> Success / RecoveredSuccess when the answer parses
                   -> RawSurfaced when it does not

The fallback synthesizer only covers *unavailability or failure* of the
model.  A received-but-malformed answer is shown raw, never replaced.
Nothing here is retried and nothing is kept between requests.
"""
from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.providers.base import LLMConfig, LLMProvider
from core.providers.registry import DEFAULT_MODEL, get_provider
from shared.schemas.brief import CampaignBrief
from shared.schemas.plan import CampaignPlan

from .fallback import synthesize_fallback
from .parser import parse_plan
from .prompts import plan_messages
from .validator import validate_brief

logger = logging.getLogger(__name__)

NO_KEY_WARNING = (
    "OPENAI_API_KEY is not configured. Responding with a heuristic fallback plan."
)
MODEL_FAILURE_WARNING = (
    "Failed to generate plan with OpenAI. Provided a fallback strategy instead."
)

PLAN_TEMPERATURE = 0.4


class PlanState(str, enum.Enum):
    REJECTED = "rejected"
    FALLBACK_NO_KEY = "fallback_no_key"
    FALLBACK_ON_ERROR = "fallback_on_error"
    SUCCESS = "success"
    RECOVERED_SUCCESS = "recovered_success"
    RAW_SURFACED = "raw_surfaced"


@dataclass
class PlanOutcome:
    """Terminal state of one orchestration, ready to serialise."""

    state: PlanState
    plan: Optional[CampaignPlan] = None
    raw: Optional[str] = None
    warning: Optional[str] = None
    notice: Optional[str] = None
    issues: Dict[str, Any] = field(default_factory=dict)

    @property
    def status_code(self) -> int:
        return 400 if self.state == PlanState.REJECTED else 200

    @property
    def used_fallback(self) -> bool:
        return self.state in (PlanState.FALLBACK_NO_KEY, PlanState.FALLBACK_ON_ERROR)

    def body(self) -> Dict[str, Any]:
        if self.state == PlanState.REJECTED:
            return {"error": "Invalid input", "issues": self.issues}
        plan = self.plan.to_wire() if self.plan is not None else None
        if self.used_fallback:
            return {"plan": plan, "raw": None, "warning": self.warning}
        return {"plan": plan, "raw": self.raw, "notice": self.notice}


class PlanOrchestrator:
    """Validate a brief, then produce a plan via the model or the fallback.

    Parameters
    ----------
    provider : LLMProvider, optional
        Injected chat backend.  Built from the registry on demand if omitted.
    api_key : str, optional
        OpenAI credential.  When omitted, ``OPENAI_API_KEY`` is read from the
        environment on every call, so each request sees current config.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        api_key: Optional[str] = None,
        config: Optional[LLMConfig] = None,
    ):
        self.provider = provider
        self.api_key = api_key
        self.config = config or LLMConfig(model=DEFAULT_MODEL, temperature=PLAN_TEMPERATURE)

    def _credential(self) -> str:
        if self.api_key is not None:
            return self.api_key
        return os.environ.get("OPENAI_API_KEY", "")

    def generate(self, raw: Any) -> PlanOutcome:
        validation = validate_brief(raw)
        if not validation.ok:
            return PlanOutcome(state=PlanState.REJECTED, issues=validation.issues())
        return self.generate_for_brief(validation.brief)

    def generate_for_brief(self, brief: CampaignBrief) -> PlanOutcome:
        api_key = self._credential()
        if not api_key:
            logger.info("No OpenAI credential configured; using fallback plan for %r", brief.business_name)
            return PlanOutcome(
                state=PlanState.FALLBACK_NO_KEY,
                plan=synthesize_fallback(brief),
                warning=NO_KEY_WARNING,
            )

        try:
            provider = self.provider or get_provider(api_key=api_key)
            system, user = plan_messages(brief)
            response = provider.generate_text(
                system["content"],
                user["content"],
                config=self.config,
            )
        except Exception:
            logger.exception("Model call failed for %r; using fallback plan", brief.business_name)
            return PlanOutcome(
                state=PlanState.FALLBACK_ON_ERROR,
                plan=synthesize_fallback(brief),
                warning=MODEL_FAILURE_WARNING,
            )

        parsed = parse_plan(response.raw_text or "")
        if parsed.plan is None:
            return PlanOutcome(
                state=PlanState.RAW_SURFACED,
                raw=parsed.raw,
                notice=parsed.message,
            )

        _check_channel_alignment(brief, parsed.plan)
        return PlanOutcome(
            state=PlanState.RECOVERED_SUCCESS if parsed.recovered else PlanState.SUCCESS,
            plan=parsed.plan,
            notice=parsed.message,
        )


def _check_channel_alignment(brief: CampaignBrief, plan: CampaignPlan) -> None:
    """Log when the model's channel plays drift from the requested channels."""
    planned = [play.channel for play in plan.channel_strategy]
    if planned != list(brief.channels):
        logger.warning(
            "Model channel strategy %s does not match requested channels %s",
            planned, list(brief.channels),
        )
