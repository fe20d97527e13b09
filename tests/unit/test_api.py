"""
HTTP tests for the coaching API.

These go through FastAPI's TestClient, so routing, validation and auth
are exercised, but nothing leaves the process.
"""

from pillarcoach.core.coaching.models import CoachingModel


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class TestHealth:
    """Tests for liveness and readiness."""

    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["details"]["coaching_models"] == 7

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert {check["name"] for check in body["checks"]} == {"configuration", "lexicon"}


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class TestAuthentication:
    """Tests for the API key gate."""

    def test_missing_key_is_forbidden(self, client):
        response = client.post("/api/v1/coaching/select", json={"text": "vana"})
        assert response.status_code == 403

    def test_wrong_key_is_forbidden(self, client):
        response = client.post(
            "/api/v1/coaching/select",
            json={"text": "vana"},
            headers={"X-API-Key": "nope"},
        )
        assert response.status_code == 403


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class TestModelEndpoints:
    """Tests for browsing the lexicon."""

    def test_list_models_in_declaration_order(self, client, auth_headers):
        response = client.get("/api/v1/coaching/models", headers=auth_headers)

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [model.value for model in CoachingModel]

    def test_get_model_includes_directive(self, client, auth_headers):
        response = client.get("/api/v1/coaching/models/mindfulness", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["display_name"] == "Mindfulness-baserad Coaching"
        assert "• Body scanning" in body["directive"]

    def test_unknown_model_is_404(self, client, auth_headers):
        response = client.get("/api/v1/coaching/models/astrology", headers=auth_headers)
        assert response.status_code == 404


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelectEndpoint:
    """Tests for POST /select."""

    def test_select_habit_text(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/select",
            json={"text": "jag vill sluta snusa"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["primary"] == "neuroplastic"
        assert body["secondary"] is None
        assert body["scores"][0] == {"model": "neuroplastic", "score": 2.0}

    def test_select_uses_pillar_context(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/select",
            json={"text": "", "context": {"pillar_type": "talent"}},
            headers=auth_headers,
        )

        assert response.json()["primary"] == "strengths_based"

    def test_empty_text_falls_back(self, client, auth_headers):
        response = client.post("/api/v1/coaching/select", json={}, headers=auth_headers)

        assert response.json()["primary"] == "adaptive_ai"
        assert response.json()["confidence"] == 0.7

    def test_overlong_text_rejected(self, client, auth_headers, test_settings):
        text = "a" * (test_settings.max_input_chars + 1)

        response = client.post("/api/v1/coaching/select", json={"text": text}, headers=auth_headers)

        assert response.status_code == 400


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

class TestPromptEndpoints:
    """Tests for the prompt-building endpoints."""

    def test_conversational_prompt(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/conversational",
            json={
                "context": {"pillar_type": "self_care", "current_challenges": ["sluta snusa"]},
                "intensity": "gentle",
                "request": "Hur börjar jag?",
            },
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert "Neuroplastisk Metod" in body["instruction"]
        assert "Intensitet: gentle" in body["instruction"]
        assert "Empatinivå: high" in body["instruction"]
        assert body["request_text"].startswith("COACHING-FÖRFRÅGAN:\nHur börjar jag?")

    def test_actionable_prompt_clamps_count(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/actionables",
            json={"assessment_data": {"score": 2}, "preferences": {"total_tasks": 20}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["target_count"] == 8
        assert "Skapa 8 personliga" in body["user_text"]

    def test_actionable_prompt_from_planning_intensity(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/actionables",
            json={"planning_intensity": "chill", "duration_weeks": 2},
            headers=auth_headers,
        )

        assert response.json()["target_count"] == 4

    def test_non_numeric_total_tasks_falls_back_to_default(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/actionables",
            json={"preferences": {"total_tasks": "många"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["target_count"] == 5

    def test_unserializable_assessment_is_422(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/actionables",
            content='{"assessment_data": {"score": NaN}}',
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert "assessment data" in response.json()["detail"]

    def test_unserializable_context_in_conversation_is_422(self, client, auth_headers):
        response = client.post(
            "/api/v1/coaching/prompts/conversational",
            content='{"context": {"assessment_data": {"score": NaN}}}',
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert "assessment data" in response.json()["detail"]
