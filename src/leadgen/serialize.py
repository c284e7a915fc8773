"""Plan serialisation for copy/export."""
from __future__ import annotations

import json

from shared.schemas.plan import CampaignPlan


def plan_to_json(plan: CampaignPlan) -> str:
    """Serialise a plan with camelCase keys and 2-space indentation."""
    return json.dumps(plan.to_wire(), indent=2, ensure_ascii=False)
