"""Tests for the HTTP API."""

import pytest
from unittest.mock import AsyncMock
from dataclasses import dataclass

from fastapi.testclient import TestClient

from app.main import app
from app.core.booking.flow import DialogueController
from app.core.booking.response import ResponseGenerator


@dataclass
class MockClaudeResponse:
    """Mock Claude response."""
    content: str
    model: str = "claude-3-5-haiku-20241022"
    input_tokens: int = 100
    output_tokens: int = 50
    stop_reason: str = "end_turn"
    latency_ms: float = 50.0


class TestChatAPI:
    """Test chat endpoints."""

    @pytest.fixture
    def mock_claude_client(self):
        """Mock Claude client."""
        client = AsyncMock()
        client.generate.return_value = MockClaudeResponse(content="Happy to help.")
        return client

    @pytest.fixture
    def client(self, mock_claude_client):
        """Test client with an LLM-free controller."""
        with TestClient(app) as test_client:
            app.state.dialogue_controller = DialogueController(
                store=app.state.session_store,
                responses=ResponseGenerator(claude_client=mock_claude_client),
            )
            yield test_client

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert "timestamp" in body

    def test_chat_requires_message(self, client):
        response = client.post("/chat", json={"sessionId": "s1"})

        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}

    def test_chat_rejects_empty_message(self, client):
        response = client.post("/chat", json={"message": "", "sessionId": "s1"})

        assert response.status_code == 400

    def test_chat_malformed_body(self, client):
        response = client.post("/chat", json={"message": ["not", "text"]})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_chat_returns_reply_and_state(self, client):
        response = client.post(
            "/chat", json={"message": "I want to book a flight", "sessionId": "s1"}
        )

        assert response.status_code == 200
        body = response.json()
        assert "Which source system" in body["reply"]
        assert body["state"] == {
            "phase": "AWAITING_SOURCE",
            "flow": "FLIGHT",
            "source": None,
            "flightType": None,
            "departureDate": None,
            "returnDate": None,
            "step": 0,
        }

    def test_chat_default_session(self, client):
        client.post("/chat", json={"message": "hello"})

        response = client.get("/session/default")

        assert response.status_code == 200
        assert response.json()["state"]["phase"] == "AWAITING_BOOKING_INTENT"

    def test_full_round_trip(self, client):
        messages = [
            "hi",
            "yes",
            "flight",
            "amadeus",
            "round trip",
            "16/01/2026",
            "20/01/2026",
        ]
        for message in messages:
            response = client.post("/chat", json={"message": message, "sessionId": "rt"})

        body = response.json()
        assert body["state"]["phase"] == "GUIDED_FLOW"
        assert body["state"]["flightType"] == "ROUND_TRIP"
        assert "16/01/2026 – 20/01/2026" in body["reply"]

    def test_freeform_reply(self, client, mock_claude_client):
        client.post("/chat", json={"message": "hi", "sessionId": "ff"})

        response = client.post("/chat", json={"message": "no thanks", "sessionId": "ff"})

        assert response.status_code == 200
        assert response.json()["reply"] == "Happy to help."
        mock_claude_client.generate.assert_awaited_once()

    def test_reset(self, client):
        client.post("/chat", json={"message": "book a hotel", "sessionId": "r1"})

        response = client.post("/reset", json={"sessionId": "r1"})

        assert response.status_code == 200
        assert response.json() == {"message": "Session reset successfully"}
        session = client.get("/session/r1").json()
        assert session["state"]["phase"] == "GREETING"
        assert session["history"] == []

    def test_reset_without_body(self, client):
        client.post("/chat", json={"message": "hello"})

        response = client.post("/reset")

        assert response.status_code == 200
        assert client.get("/session/default").json()["messageCount"] == 0

    def test_get_session(self, client):
        client.post("/chat", json={"message": "hi", "sessionId": "v1"})

        response = client.get("/session/v1")

        assert response.status_code == 200
        body = response.json()
        assert body["sessionId"] == "v1"
        assert body["messageCount"] == 1
        assert [m["role"] for m in body["history"]] == ["user", "assistant"]
        assert body["history"][0]["content"] == "hi"

    def test_get_unknown_session(self, client):
        response = client.get("/session/never-seen")

        assert response.status_code == 404
        assert response.json() == {"error": "Session not found"}

    def test_processing_error(self, client):
        failing = AsyncMock(spec=DialogueController)
        failing.process.side_effect = RuntimeError("store exploded")
        app.state.dialogue_controller = failing

        response = client.post("/chat", json={"message": "hi", "sessionId": "e1"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "An error occurred processing your request"
        assert body["details"] == "store exploded"
