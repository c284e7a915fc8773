"""Campaign plan generation: validation, prompting, parsing, and fallback."""

from .fallback import synthesize_fallback
from .orchestrator import PlanOrchestrator, PlanOutcome, PlanState
from .parser import PlanParseResult, parse_plan
from .prompts import build_plan_prompt
from .serialize import plan_to_json
from .validator import BriefValidation, validate_brief

__all__ = [
    "BriefValidation",
    "PlanOrchestrator",
    "PlanOutcome",
    "PlanParseResult",
    "PlanState",
    "build_plan_prompt",
    "parse_plan",
    "plan_to_json",
    "synthesize_fallback",
    "validate_brief",
]
