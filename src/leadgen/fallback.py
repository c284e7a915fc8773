"""Heuristic fallback plan: used when the model is unavailable or fails.

Pure and deterministic: built only from brief fields, no I/O.  The brief
is already validated, so every interpolated string is non-empty.
"""
from __future__ import annotations

from shared.schemas.brief import CampaignBrief
from shared.schemas.plan import (
    AutomationFlow,
    CampaignPlan,
    CampaignSummary,
    ChannelPlay,
    Experiment,
    IdealCustomerProfile,
    MessagingPillar,
)

FIRST_NAME_TOKEN = "{{first_name}}"


def cadence_for(timeframe: str) -> str:
    return "3x weekly" if timeframe == "2 weeks" else "Weekly"


def _channel_play(brief: CampaignBrief, channel: str) -> ChannelPlay:
    return ChannelPlay(
        channel=channel,
        objective=f"Drive {brief.offer.lower()} conversions.",
        play=(
            f"Run a {brief.budget_level} budget program combining intent data "
            "and manual research."
        ),
        cadence=cadence_for(brief.timeframe),
        sample_copy=f"Hi {FIRST_NAME_TOKEN}, {brief.offer}",
    )


def synthesize_fallback(brief: CampaignBrief) -> CampaignPlan:
    """Build a complete plan from the brief alone."""
    return CampaignPlan(
        campaign_summary=CampaignSummary(
            north_star=(
                f"Generate qualified pipeline for {brief.business_name} "
                f"within {brief.timeframe}."
            ),
            success_metrics=[
                "Meetings booked per week",
                "Reply rate %",
                "Pipeline value influenced",
            ],
            positioning_theme=f"Position as the {brief.unique_value.lower()}",
        ),
        ideal_customer_profile=IdealCustomerProfile(
            company_traits=[
                f"Operates in {brief.industry}",
                "Mid-market to enterprise accounts",
                "Teams with urgent need for modernization",
            ],
            buyer_persona=[
                "Economic buyer: VP / Director level stakeholder",
                "Technical champion: hands-on practitioner",
                "Influencer: adjacent department peer",
            ],
            pain_points=[
                "Manual workflows causing wasted spend",
                "Pressure to show ROI quickly",
                "Need to differentiate in competitive market",
            ],
        ),
        messaging_pillars=[
            MessagingPillar(
                title="Value driver",
                angle=(
                    f"Highlight how {brief.product_description.lower()} "
                    "unlocks measurable ROI."
                ),
                proof_points=[
                    "Quantify time or cost savings",
                    "Reference a key customer win",
                    "Mention implementation support",
                ],
            ),
            MessagingPillar(
                title="Risk reducer",
                angle="Show how the offer reduces risk compared to current status quo.",
                proof_points=[
                    "Share guarantee or SLA",
                    "Provide social proof snippet",
                    "Emphasize ease-of-adoption",
                ],
            ),
        ],
        channel_strategy=[_channel_play(brief, channel) for channel in brief.channels],
        automation_workflow=[
            AutomationFlow(
                name="Prompt follow-up sequence",
                trigger="Form submission or positive reply",
                steps=[
                    "Send tailored follow-up within 4 hours",
                    "Share relevant asset on day 3",
                    "Escalate to call invite on day 5 if no response",
                ],
            ),
        ],
        experiments=[
            Experiment(
                hypothesis="Referencing a mutual connection increases cold outreach replies.",
                experiment="Test LinkedIn InMail templates with social proof block.",
                metric="Positive reply rate",
            ),
            Experiment(
                hypothesis="Offering a quick teardown boosts meeting bookings.",
                experiment="Cold email variant offering 15-min audit.",
                metric="Meetings booked",
            ),
        ],
        next_steps=[
            "Finalize lead list with top 200 accounts",
            "Draft channel-specific outreach scripts",
            "Enable experiment tracking dashboard",
            "Launch in waves and optimize weekly",
        ],
    )
