"""Campaign brief schema: the validated inbound request."""

from __future__ import annotations

from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Goal = Literal[
    "Book discovery calls",
    "Increase demo requests",
    "Grow trial sign-ups",
    "Generate inbound leads",
    "Re-engage dormant leads",
    "Expand into a new segment",
]

Channel = Literal[
    "Cold email",
    "LinkedIn outreach",
    "Webinars",
    "Paid social",
    "Content & SEO",
    "Partnerships",
    "Events",
]

Tone = Literal["Data-driven", "Conversational", "Authoritative", "Playful"]

BudgetLevel = Literal["lean", "balanced", "aggressive"]

Timeframe = Literal["2 weeks", "30 days", "90 days"]

GOAL_OPTIONS: List[str] = list(get_args(Goal))
CHANNEL_OPTIONS: List[str] = list(get_args(Channel))
TONE_OPTIONS: List[str] = list(get_args(Tone))
BUDGET_LEVEL_OPTIONS: List[str] = list(get_args(BudgetLevel))
TIMEFRAME_OPTIONS: List[str] = list(get_args(Timeframe))


class CampaignBrief(BaseModel):
    """Go-to-market parameters submitted through the campaign form.

    Wire names are camelCase (``businessName``); attributes are snake_case.
    All strings are trimmed before length checks, so whitespace-only input
    is rejected as empty.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )

    business_name: str = Field(..., min_length=1, max_length=120)
    industry: str = Field(..., min_length=1, max_length=120)
    product_description: str = Field(..., min_length=1, max_length=600)
    target_customer: str = Field(..., min_length=1, max_length=600)
    unique_value: str = Field(..., min_length=1, max_length=400)
    goals: List[Goal] = Field(..., min_length=1)
    channels: List[Channel] = Field(..., min_length=1)
    tone: Tone
    offer: str = Field(..., min_length=1, max_length=300)
    notes: Optional[str] = Field(default=None, max_length=1000)
    budget_level: BudgetLevel
    timeframe: Timeframe

    @field_validator("goals", "channels")
    @classmethod
    def dedupe_preserving_order(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def to_wire(self) -> dict:
        """Serialise with the camelCase field names used on the wire."""
        return self.model_dump(by_alias=True)


SAMPLE_BRIEF: dict = {
    "businessName": "Lumos Analytics",
    "industry": "B2B SaaS • Marketing Analytics",
    "productDescription": (
        "A RevOps intelligence platform that connects marketing campaigns to "
        "pipeline impact and provides automated recommendations."
    ),
    "targetCustomer": (
        "Heads of Demand Gen or Growth at Series B-D SaaS companies using "
        "HubSpot/Salesforce, running multi-channel campaigns, needing clearer ROI."
    ),
    "uniqueValue": (
        "Real-time attribution without heavy implementation, plus AI suggestions "
        "that surface tactics proven to lift opportunity creation."
    ),
    "goals": ["Book discovery calls", "Increase demo requests"],
    "channels": ["Cold email", "LinkedIn outreach", "Webinars"],
    "tone": "Data-driven",
    "offer": "Unlock a free pipeline efficiency audit with tailored next steps.",
    "notes": (
        "We recently partnered with Gong and have a customer story from Segment. "
        "We collaborate closely with RevOps teams."
    ),
    "budgetLevel": "balanced",
    "timeframe": "30 days",
}


def brief_options() -> dict:
    """Closed option sets for enumerated brief fields, in display order."""
    return {
        "goals": list(GOAL_OPTIONS),
        "channels": list(CHANNEL_OPTIONS),
        "tones": list(TONE_OPTIONS),
        "budgetLevels": list(BUDGET_LEVEL_OPTIONS),
        "timeframes": list(TIMEFRAME_OPTIONS),
    }
