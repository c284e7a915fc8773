"""Shared fixtures for the Pipeline Pilot test suite.

Provides a valid sample brief, a schema-conformant plan payload, and a
mock LLM provider that returns canned text.
"""

import copy
import json
from unittest.mock import MagicMock

import pytest

from core.providers.base import LLMResponse
from shared.schemas.brief import SAMPLE_BRIEF, CampaignBrief


# ---------------------------------------------------------------------------
# Brief fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def brief_payload():
    """A fully valid wire-format brief (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_BRIEF)


@pytest.fixture
def brief(brief_payload):
    return CampaignBrief.model_validate(brief_payload)


@pytest.fixture(autouse=True)
def _no_openai_key(monkeypatch):
    """Tests never reach the real OpenAI API."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


# ---------------------------------------------------------------------------
# Plan fixtures
# ---------------------------------------------------------------------------

PLAN_PAYLOAD = {
    "campaignSummary": {
        "northStar": "Book 40 qualified discovery calls in 30 days.",
        "successMetrics": ["Discovery calls booked", "Positive reply rate"],
        "positioningTheme": "Attribution you can trust on day one",
    },
    "idealCustomerProfile": {
        "companyTraits": ["Series B-D SaaS", "HubSpot or Salesforce stack"],
        "buyerPersona": ["Head of Demand Gen"],
        "painPoints": ["Cannot tie campaigns to pipeline"],
    },
    "messagingPillars": [
        {
            "title": "Proof over promises",
            "angle": "Show pipeline impact within a week.",
            "proofPoints": ["Segment case study"],
        }
    ],
    "channelStrategy": [
        {
            "channel": "Cold email",
            "objective": "Book audits",
            "play": "Three-touch sequence",
            "cadence": "Twice weekly",
            "sampleCopy": "Hi {{first_name}}, want a free audit?",
        },
        {
            "channel": "LinkedIn outreach",
            "objective": "Warm up buyers",
            "play": "Connect and comment",
            "cadence": "Daily",
            "sampleCopy": "Loved your post on attribution.",
        },
        {
            "channel": "Webinars",
            "objective": "Educate",
            "play": "Monthly RevOps clinic",
            "cadence": "Monthly",
            "sampleCopy": "Join our live teardown.",
        },
    ],
    "automationWorkflow": [
        {
            "name": "Audit follow-up",
            "trigger": "Audit requested",
            "steps": ["Send calendar link", "Share checklist"],
        }
    ],
    "experiments": [
        {
            "hypothesis": "Gong partnership mention lifts replies.",
            "experiment": "A/B subject line",
            "metric": "Reply rate",
        }
    ],
    "nextSteps": ["Build list", "Launch sequence"],
}


@pytest.fixture
def plan_payload():
    return copy.deepcopy(PLAN_PAYLOAD)


@pytest.fixture
def plan_json(plan_payload):
    return json.dumps(plan_payload)


# ---------------------------------------------------------------------------
# Mock LLM
# ---------------------------------------------------------------------------

def make_mock_provider(text: str = "", error: Exception = None) -> MagicMock:
    """Create a mock provider whose generate_text returns ``text`` or raises."""
    mock = MagicMock()
    if error is not None:
        mock.generate_text = MagicMock(side_effect=error)
    else:
        mock.generate_text = MagicMock(
            return_value=LLMResponse(raw_text=text, model="gpt-4o-mini", provider="openai")
        )
    return mock


@pytest.fixture
def mock_provider():
    """Factory fixture: ``mock_provider(text)`` or ``mock_provider(error=...)``."""
    return make_mock_provider
