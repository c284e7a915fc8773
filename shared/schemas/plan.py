"""Campaign plan schema: the structured blueprint returned to the caller.

The presentation layer renders these sections without re-validating, so
every list must be non-empty and unknown keys are dropped on parse.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _PlanModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CampaignSummary(_PlanModel):
    north_star: str
    success_metrics: List[str] = Field(..., min_length=1)
    positioning_theme: str


class IdealCustomerProfile(_PlanModel):
    company_traits: List[str] = Field(..., min_length=1)
    buyer_persona: List[str] = Field(..., min_length=1)
    pain_points: List[str] = Field(..., min_length=1)


class MessagingPillar(_PlanModel):
    title: str
    angle: str
    proof_points: List[str] = Field(..., min_length=1)


class ChannelPlay(_PlanModel):
    channel: str
    objective: str
    play: str
    cadence: str
    sample_copy: str


class AutomationFlow(_PlanModel):
    name: str
    trigger: str
    steps: List[str] = Field(..., min_length=1)


class Experiment(_PlanModel):
    hypothesis: str
    experiment: str
    metric: str


class CampaignPlan(_PlanModel):
    """Complete multi-section lead-generation blueprint."""

    campaign_summary: CampaignSummary
    ideal_customer_profile: IdealCustomerProfile
    messaging_pillars: List[MessagingPillar] = Field(..., min_length=1)
    channel_strategy: List[ChannelPlay] = Field(..., min_length=1)
    automation_workflow: List[AutomationFlow] = Field(..., min_length=1)
    experiments: List[Experiment] = Field(..., min_length=1)
    next_steps: List[str] = Field(..., min_length=1)

    def to_wire(self) -> dict:
        """Serialise with the camelCase field names used on the wire."""
        return self.model_dump(by_alias=True)
