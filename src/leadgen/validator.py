"""Request validation for campaign briefs.

``validate_brief`` never raises: callers get a ``BriefValidation`` that is
either ``ok`` with a brief, or carries one human-readable message per
offending field (the first violation found for that field).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from shared.schemas.brief import CampaignBrief

logger = logging.getLogger(__name__)


@dataclass
class BriefValidation:
    """Outcome of validating one inbound request body."""

    brief: Optional[CampaignBrief] = None
    errors: Dict[str, str] = field(default_factory=dict)
    form_errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.brief is not None

    def issues(self) -> Dict[str, Any]:
        return {"formErrors": list(self.form_errors), "fieldErrors": dict(self.errors)}


def _message(error: Dict[str, Any]) -> str:
    if error.get("type") == "missing":
        return "Required"
    return error.get("msg", "Invalid value")


def validate_brief(raw: Any) -> BriefValidation:
    """Validate an untrusted request body against :class:`CampaignBrief`."""
    if not isinstance(raw, dict):
        return BriefValidation(form_errors=["Expected a JSON object"])

    try:
        brief = CampaignBrief.model_validate(raw)
    except ValidationError as e:
        result = BriefValidation()
        for error in e.errors():
            loc = error.get("loc") or ()
            if not loc:
                result.form_errors.append(_message(error))
                continue
            result.errors.setdefault(str(loc[0]), _message(error))
        logger.info("Rejected brief: %s", ", ".join(sorted(result.errors)) or "form")
        return result

    return BriefValidation(brief=brief)
