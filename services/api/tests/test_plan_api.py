"""Plan endpoint tests: every terminal state through HTTP."""

import json

import pytest

from core.providers.base import LLMError


def _plan_text(client, brief_payload):
    """A valid plan JSON string, borrowed from the fallback path."""
    resp = client.post("/v1/plan", json=brief_payload)
    return json.dumps(resp.json()["plan"])


class TestValidation:
    def test_missing_business_name(self, client, brief_payload):
        del brief_payload["businessName"]
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "Invalid input"
        assert "businessName" in data["issues"]["fieldErrors"]

    def test_bad_tone_and_empty_goals(self, client, brief_payload):
        brief_payload["tone"] = "Sarcastic"
        brief_payload["goals"] = []
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 400
        field_errors = resp.json()["issues"]["fieldErrors"]
        assert {"tone", "goals"} <= set(field_errors)

    def test_non_json_body(self, client):
        resp = client.post(
            "/v1/plan",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["issues"]["formErrors"]

    def test_deeply_nested_body(self, client):
        resp = client.post(
            "/v1/plan",
            content=b"[" * 200000 + b"]" * 200000,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["issues"]["formErrors"] == ["Request body must be valid JSON"]

    def test_array_body(self, client):
        resp = client.post("/v1/plan", json=[1, 2, 3])
        assert resp.status_code == 400
        assert resp.json()["issues"]["formErrors"]

    def test_invalid_brief_never_reaches_model(self, client, brief_payload, use_model_text):
        provider = use_model_text("unused")
        brief_payload["channels"] = []
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 400
        provider.generate_text.assert_not_called()


class TestFallback:
    def test_no_credential(self, client, brief_payload):
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["plan"] is not None
        assert data["raw"] is None
        assert "OPENAI_API_KEY" in data["warning"]
        assert [p["channel"] for p in data["plan"]["channelStrategy"]] == brief_payload["channels"]

    def test_original_path_alias(self, client, brief_payload):
        resp = client.post("/api/plan", json=brief_payload)
        assert resp.status_code == 200
        assert resp.json()["plan"] is not None

    def test_model_failure(self, client, brief_payload, use_model_text):
        use_model_text(error=LLMError("boom: internal detail", provider="openai"))
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["plan"] is not None
        assert data["raw"] is None
        assert "Failed to generate plan" in data["warning"]
        assert "internal detail" not in resp.text


class TestModelPath:
    def test_clean_plan(self, client, brief_payload, use_model_text):
        text = _plan_text(client, brief_payload)
        use_model_text(text)
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data == {"plan": json.loads(text), "raw": None, "notice": None}

    def test_recovered_plan(self, client, brief_payload, use_model_text):
        text = _plan_text(client, brief_payload)
        use_model_text(f"Sure! Here you go: {text} Hope that helps.")
        data = client.post("/v1/plan", json=brief_payload).json()
        assert data["plan"] == json.loads(text)
        assert data["raw"] is None
        assert data["notice"]

    @pytest.mark.parametrize("text", ["I cannot help with that.", '{"half": '])
    def test_raw_surfaced(self, client, brief_payload, use_model_text, text):
        use_model_text(text)
        resp = client.post("/v1/plan", json=brief_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["plan"] is None
        assert data["raw"] == text
        assert data["notice"] == "model output could not be parsed as a structured plan"


class TestOptions:
    def test_options(self, client):
        data = client.get("/v1/plan/options").json()
        assert data["budgetLevels"] == ["lean", "balanced", "aggressive"]
        assert data["timeframes"] == ["2 weeks", "30 days", "90 days"]
        assert "Cold email" in data["channels"]

    def test_sample_brief_is_valid(self, client):
        sample = client.get("/v1/plan/sample").json()
        assert sample["businessName"] == "Lumos Analytics"
        assert client.post("/v1/plan", json=sample).status_code == 200
