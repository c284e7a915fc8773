"""Shared fixtures for API integration tests.

Uses FastAPI TestClient (in-memory, no network) so tests run
without a live server or an OpenAI account.
"""

from __future__ import annotations

import copy

import pytest


@pytest.fixture(autouse=True)
def _no_openai_key(monkeypatch):
    """Default every test to the no-credential path."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture()
def app():
    from services.api.app.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    """FastAPI TestClient: no network, no server startup needed."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture()
def brief_payload():
    from shared.schemas.brief import SAMPLE_BRIEF

    return copy.deepcopy(SAMPLE_BRIEF)


@pytest.fixture()
def use_model_text(app):
    """Route the plan endpoint through a mock model answering with ``text``."""
    from unittest.mock import MagicMock

    from core.providers.base import LLMResponse
    from services.api.app.routers.plan import get_orchestrator
    from src.leadgen.orchestrator import PlanOrchestrator

    def _install(text: str = "", error: Exception = None) -> MagicMock:
        provider = MagicMock()
        if error is not None:
            provider.generate_text.side_effect = error
        else:
            provider.generate_text.return_value = LLMResponse(raw_text=text)
        app.dependency_overrides[get_orchestrator] = lambda: PlanOrchestrator(
            provider=provider, api_key="sk-test"
        )
        return provider

    return _install
