"""Prompt templates for campaign plan generation.

The builder is a pure function of the brief: the same brief always renders
the same prompt, which keeps model calls reproducible and testable.
"""

from shared.schemas.brief import CampaignBrief

# ------------------------------------------------------------------
# System prompt
# ------------------------------------------------------------------

PLAN_SYSTEM_PROMPT = (
    "You are Pipeline Pilot, a senior demand generation strategist. "
    "Always respond with strictly valid JSON."
)

# ------------------------------------------------------------------
# Posture guidance
# ------------------------------------------------------------------

BUDGET_GUIDANCE = {
    "lean": "Favor low-cost, high-leverage plays: manual research, founder-led outreach, owned channels.",
    "balanced": "Mix organic and paid plays; reserve spend for channels with proven intent signals.",
    "aggressive": "Scale paid distribution and parallel sequences; optimize for speed to pipeline.",
}

TIMEFRAME_GUIDANCE = {
    "2 weeks": "Sprint mode: front-load outreach and pick plays that show signal within days.",
    "30 days": "One full cycle: launch, measure weekly, and iterate once on the winning angle.",
    "90 days": "Quarter plan: stage channels in waves and leave room for compounding content.",
}

# ------------------------------------------------------------------
# Output contract
# ------------------------------------------------------------------

PLAN_OUTPUT_SCHEMA = """\
{
  "campaignSummary": {
    "northStar": "string",
    "successMetrics": ["string"],
    "positioningTheme": "string"
  },
  "idealCustomerProfile": {
    "companyTraits": ["string"],
    "buyerPersona": ["string"],
    "painPoints": ["string"]
  },
  "messagingPillars": [
    {"title": "string", "angle": "string", "proofPoints": ["string"]}
  ],
  "channelStrategy": [
    {"channel": "string", "objective": "string", "play": "string", "cadence": "string", "sampleCopy": "string"}
  ],
  "automationWorkflow": [
    {"name": "string", "trigger": "string", "steps": ["string"]}
  ],
  "experiments": [
    {"hypothesis": "string", "experiment": "string", "metric": "string"}
  ],
  "nextSteps": ["string"]
}"""

# ------------------------------------------------------------------
# User message template  (the {variables} are filled at runtime)
# ------------------------------------------------------------------

PLAN_USER_TEMPLATE = """\
Design a multi-channel lead generation campaign for the business below.

BUSINESS CONTEXT:
- Business name: {business_name}
- Industry / segment: {industry}
- Product: {product_description}
- Target customer: {target_customer}
- Why they win: {unique_value}
- Offer / CTA: {offer}
- Preferred tone: {tone}
- Budget posture: {budget_level} ({budget_hint})
- Activation window: {timeframe} ({timeframe_hint})
- Additional notes: {notes}

CAMPAIGN GOALS:
{goals}

CHANNELS TO ACTIVATE (in this order):
{channels}

REQUIRED OUTPUT SECTIONS:
- campaignSummary: northStar (string), successMetrics (array of strings), positioningTheme (string)
- idealCustomerProfile: companyTraits, buyerPersona, painPoints (each an array of strings)
- messagingPillars: array of {{title, angle, proofPoints (array of strings)}}
- channelStrategy: exactly one entry per channel above, same order, each {{channel, objective, play, cadence, sampleCopy}}
- automationWorkflow: array of {{name, trigger, steps (array of strings)}}
- experiments: array of {{hypothesis, experiment, metric}}
- nextSteps: array of strings

Every array must contain at least one item. Write sample copy in a {tone} tone.

Return ONLY a single JSON object with this exact structure and field names.
Do not wrap it in markdown code fences and do not add any text before or after it:
{schema}
"""


# ------------------------------------------------------------------
# Public builders
# ------------------------------------------------------------------

def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_plan_prompt(brief: CampaignBrief) -> str:
    """Render a validated brief into the user prompt for the model."""
    return PLAN_USER_TEMPLATE.format(
        business_name=brief.business_name,
        industry=brief.industry,
        product_description=brief.product_description,
        target_customer=brief.target_customer,
        unique_value=brief.unique_value,
        offer=brief.offer,
        tone=brief.tone,
        budget_level=brief.budget_level,
        budget_hint=BUDGET_GUIDANCE[brief.budget_level],
        timeframe=brief.timeframe,
        timeframe_hint=TIMEFRAME_GUIDANCE[brief.timeframe],
        notes=brief.notes or "None provided",
        goals=_bullets(brief.goals),
        channels=_bullets(brief.channels),
        schema=PLAN_OUTPUT_SCHEMA,
    )


def plan_messages(brief: CampaignBrief) -> list:
    """Build the ``messages`` list (OpenAI chat format) for one plan request."""
    return [
        {"role": "system", "content": PLAN_SYSTEM_PROMPT},
        {"role": "user", "content": build_plan_prompt(brief)},
    ]
