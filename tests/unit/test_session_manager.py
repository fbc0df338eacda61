"""Tests for session management."""

import pytest

from app.core.intelligence.intent.types import BookingType, FlightType, SourceSystem
from app.core.intelligence.session.manager import SessionStore
from app.core.intelligence.session.models import Session
from app.core.intelligence.session.state import Phase, can_transition


class TestSessionStore:
    """Test in-memory session store."""

    @pytest.fixture
    def store(self):
        """Create empty store."""
        return SessionStore()

    def test_get_creates_default(self, store):
        session = store.get("sess-1")

        assert session.session_id == "sess-1"
        assert session.phase == Phase.GREETING
        assert session.flow is None
        assert session.step == 0
        assert session.conversation_history == []
        assert "sess-1" in store

    def test_get_returns_same_object(self, store):
        first = store.get("sess-1")
        first.phase = Phase.AWAITING_SOURCE

        assert store.get("sess-1") is first
        assert len(store) == 1

    def test_sessions_are_independent(self, store):
        a = store.get("a")
        b = store.get("b")
        a.flow = BookingType.HOTEL

        assert b.flow is None
        assert len(store) == 2

    def test_peek_does_not_create(self, store):
        assert store.peek("missing") is None
        assert "missing" not in store

    def test_reset_discards_state(self, store):
        old = store.get("sess-1")
        old.phase = Phase.GUIDED_FLOW
        old.flow = BookingType.CAR
        old.add_message("user", "hi")

        fresh = store.reset("sess-1")

        assert fresh is not old
        assert fresh.phase == Phase.GREETING
        assert fresh.flow is None
        assert fresh.conversation_history == []
        assert store.get("sess-1") is fresh

    def test_reset_unknown_session(self, store):
        session = store.reset("new")
        assert session.phase == Phase.GREETING
        assert len(store) == 1


class TestSession:
    """Test Session model."""

    def test_to_state(self):
        session = Session(
            session_id="s",
            phase=Phase.GUIDED_FLOW,
            flow=BookingType.FLIGHT,
            source=SourceSystem.FARELOGIX,
            flight_type=FlightType.ROUND_TRIP,
            departure_date="16/01/2026",
            return_date="20/01/2026",
            step=2,
        )

        assert session.to_state() == {
            "phase": "GUIDED_FLOW",
            "flow": "FLIGHT",
            "source": "FARELOGIX",
            "flightType": "ROUND_TRIP",
            "departureDate": "16/01/2026",
            "returnDate": "20/01/2026",
            "step": 2,
        }

    def test_to_state_unset(self):
        state = Session().to_state()
        assert state["phase"] == "GREETING"
        assert state["flow"] is None
        assert state["flightType"] is None

    def test_clear_booking(self):
        session = Session(
            flow=BookingType.FLIGHT,
            source=SourceSystem.AMADEUS,
            flight_type=FlightType.ONE_WAY,
            departure_date="16/01/2026",
            step=5,
        )
        session.clear_booking()

        assert session.flow is None
        assert session.source is None
        assert session.flight_type is None
        assert session.departure_date is None
        assert session.return_date is None
        assert session.step == 0

    def test_recent_history(self):
        session = Session()
        for i in range(10):
            session.add_message("user" if i % 2 == 0 else "assistant", f"m{i}")

        recent = session.recent_history(6)

        assert len(recent) == 6
        assert recent[0]["content"] == "m4"
        assert recent[-1]["content"] == "m9"
        assert len(session.conversation_history) == 10

    def test_recent_history_is_copy(self):
        session = Session()
        session.add_message("user", "hi")
        session.recent_history(6)[0]["content"] = "changed"
        assert session.conversation_history[0]["content"] == "hi"


class TestPhaseTransitions:
    """Test phase transition table."""

    def test_valid(self):
        assert can_transition(Phase.GREETING, Phase.AWAITING_BOOKING_INTENT)
        assert can_transition(Phase.AWAITING_SOURCE, Phase.GUIDED_FLOW)
        assert can_transition(Phase.GUIDED_FLOW, Phase.AWAITING_BOOKING_INTENT)

    def test_staying_is_valid(self):
        assert can_transition(Phase.AWAITING_RETURN_DATE, Phase.AWAITING_RETURN_DATE)

    def test_invalid(self):
        assert not can_transition(Phase.GREETING, Phase.GUIDED_FLOW)
        assert not can_transition(Phase.AWAITING_RETURN_DATE, Phase.AWAITING_SOURCE)
